"""Memento pattern: saving and restoring an originator's state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Memento:
    """An immutable snapshot of an originator's state."""

    state: str


@dataclass
class Originator:
    """Owns a state that can be captured and restored."""

    state: str = ""

    def create_memento(self) -> Memento:
        """Capture the current state."""
        return Memento(self.state)

    def restore_memento(self, memento: Memento) -> None:
        """Go back to the state held by ``memento``."""
        self.state = memento.state


@dataclass
class Caretaker:
    """Keeps the history of mementos."""

    mementos: list[Memento] = field(default_factory=list)

    def add_memento(self, memento: Memento) -> None:
        """Store a snapshot."""
        self.mementos.append(memento)

    def get_memento(self, index: int) -> Memento:
        """Return the snapshot at ``index``; raises IndexError if there is none."""
        return self.mementos[index]