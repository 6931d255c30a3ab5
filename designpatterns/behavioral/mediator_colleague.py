"""Mediator pattern: two colleagues that talk only through a mediator."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Mediator(ABC):
    """Routes messages between colleagues."""

    @abstractmethod
    def send(self, message: str, colleague: Colleague) -> None:
        """Deliver ``message`` sent by ``colleague`` to its counterpart."""


class Colleague:
    """A participant that sends through a mediator and reports what it receives."""

    number = 0

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def send(self, message: str) -> None:
        """Announce the message and hand it to the mediator."""
        print(f"Коллега {self.number} отправляет: {message}")
        self.mediator.send(message, self)

    def receive(self, message: str) -> None:
        """Report a message delivered by the mediator."""
        print(f"Коллега {self.number} получил: {message}")


class Colleague1(Colleague):
    """The first colleague."""

    number = 1


class Colleague2(Colleague):
    """The second colleague."""

    number = 2


class ConcreteMediator(Mediator):
    """Connects exactly two colleagues: whatever one sends, the other receives."""

    def __init__(self) -> None:
        self.colleague1: Colleague | None = None
        self.colleague2: Colleague | None = None

    def send(self, message: str, colleague: Colleague) -> None:
        recipient = self.colleague2 if colleague is self.colleague1 else self.colleague1
        if recipient is None:
            raise RuntimeError("colleague not set")
        recipient.receive(message)