"""Visitor pattern: operations on shapes kept outside the shape classes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Visitor(ABC):
    """An operation with one method per shape type."""

    @abstractmethod
    def visit_square(self, square: Square) -> None:
        """Apply the operation to a square."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None:
        """Apply the operation to a circle."""

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None:
        """Apply the operation to a rectangle."""


class Shape(ABC):
    """A shape that can be visited."""

    type_name = "Shape"

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Dispatch to the visitor method for this shape."""


@dataclass
class Square(Shape):
    side: int = 0

    type_name = "Square"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_square(self)


@dataclass
class Circle(Shape):
    radius: int = 0

    type_name = "Circle"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_circle(self)


@dataclass
class Rectangle(Shape):
    length: int = 0
    breadth: int = 0

    type_name = "rectangle"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_rectangle(self)


class AreaCalculator(Visitor):
    """Calculates the area of each visited shape, keeping the latest in ``area``."""

    def __init__(self) -> None:
        self.area: float = 0

    def visit_square(self, square: Square) -> None:
        print("Calculating area for square")
        self.area = square.side * square.side

    def visit_circle(self, circle: Circle) -> None:
        print("Calculating area for circle")
        self.area = math.pi * circle.radius * circle.radius

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        print("Calculating area for rectangle")
        self.area = rectangle.length * rectangle.breadth


class MiddleCoordinates(Visitor):
    """Calculates the middle point of each visited shape, keeping it in ``x`` and ``y``."""

    def __init__(self) -> None:
        self.x: float = 0
        self.y: float = 0

    def visit_square(self, square: Square) -> None:
        print("Calculating middle point coordinates for square")
        self.x = self.y = square.side / 2

    def visit_circle(self, circle: Circle) -> None:
        print("Calculating middle point coordinates for circle")
        self.x = self.y = circle.radius

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        print("Calculating middle point coordinates for rectangle")
        self.x = rectangle.length / 2
        self.y = rectangle.breadth / 2