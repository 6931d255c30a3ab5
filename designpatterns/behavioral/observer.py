"""Observer pattern: a subject that notifies attached observers of state changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Receives state updates from a subject."""

    @abstractmethod
    def update(self, state: str) -> None:
        """React to a new state."""


class ConcreteObserver(Observer):
    """An observer that reports each update it receives."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, state: str) -> None:
        print(f"{self.name} обновлен с состоянием: {state}")


class ConcreteSubject:
    """Holds a state and tells every attached observer when it changes."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._state = ""

    def attach(self, observer: Observer) -> None:
        """Start notifying ``observer``."""
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Stop notifying ``observer``; does nothing if it is not attached."""
        for index, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[index]
                break

    def notify(self) -> None:
        """Send the current state to all observers in attach order."""
        for observer in self._observers:
            observer.update(self._state)

    @property
    def state(self) -> str:
        return self._state

    @state.setter
    def state(self, value: str) -> None:
        self._state = value
        print(f"Состояние субъекта изменено на: {value}")
        self.notify()