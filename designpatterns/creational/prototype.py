"""Prototype pattern: shapes that can produce independent copies of themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    """A shape that can be cloned and drawn."""

    @abstractmethod
    def clone(self) -> Shape:
        """Return an independent copy of this shape."""

    @abstractmethod
    def draw(self) -> str:
        """Return a description of the shape."""


@dataclass
class Circle(Shape):
    """A circle with a radius."""

    radius: float = 0.0

    def clone(self) -> Circle:
        return Circle(radius=self.radius)

    def draw(self) -> str:
        return f"Circle with radius: {self.radius:.2f}"


@dataclass
class Square(Shape):
    """A square with a side length."""

    side: float = 0.0

    def clone(self) -> Square:
        return Square(side=self.side)

    def draw(self) -> str:
        return f"Square with side: {self.side:.2f}"