"""Flyweight pattern: shared image objects keyed by file name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Flyweight(ABC):
    """An object with shared internal state and per-call external state."""

    @abstractmethod
    def draw(self, width: int, height: int, opacity: float) -> str:
        """Draw using the given external state."""


@dataclass(frozen=True)
class ConcreteFlyweight(Flyweight):
    """An image whose file name is the shared state."""

    filename: str

    def draw(self, width: int, height: int, opacity: float) -> str:
        return (
            f"draw image: {self.filename}, width: {width}, "
            f"height: {height}, opacity: {opacity:.2f}"
        )


class FlyweightFactory:
    """Returns the pooled flyweight for a file name, creating it on first request."""

    def __init__(self) -> None:
        self._pool: dict[str, Flyweight] = {}

    def get_flyweight(self, filename: str) -> Flyweight:
        if filename not in self._pool:
            self._pool[filename] = ConcreteFlyweight(filename)
        return self._pool[filename]

    def __len__(self) -> int:
        return len(self._pool)