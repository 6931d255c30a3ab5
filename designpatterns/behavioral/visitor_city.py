"""Visitor pattern: people visiting the places of a city."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Visitor(ABC):
    """Someone who visits places."""

    @abstractmethod
    def visit_sushi_bar(self, place: SushiBar) -> str:
        """Visit a sushi bar."""

    @abstractmethod
    def visit_pizzeria(self, place: Pizzeria) -> str:
        """Visit a pizzeria."""

    @abstractmethod
    def visit_burger_bar(self, place: BurgerBar) -> str:
        """Visit a burger bar."""


class Place(ABC):
    """A place that accepts visitors."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> str:
        """Let the visitor in and return what happened."""


class SushiBar(Place):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_sushi_bar(self)

    def buy_sushi(self) -> str:
        return "Buy sushi..."


class Pizzeria(Place):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_pizzeria(self)

    def buy_pizza(self) -> str:
        return "Buy pizza..."


class BurgerBar(Place):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_burger_bar(self)

    def buy_burger(self) -> str:
        return "Buy burger..."


class People(Visitor):
    """Visitors who buy the house speciality wherever they go."""

    def visit_sushi_bar(self, place: SushiBar) -> str:
        return place.buy_sushi()

    def visit_pizzeria(self, place: Pizzeria) -> str:
        return place.buy_pizza()

    def visit_burger_bar(self, place: BurgerBar) -> str:
        return place.buy_burger()


class City:
    """A collection of places to visit."""

    def __init__(self) -> None:
        self._places: list[Place] = []

    def add(self, place: Place) -> None:
        """Append a place."""
        self._places.append(place)

    def accept(self, visitor: Visitor) -> str:
        """Visit every place in order and concatenate the results."""
        return "".join(place.accept(visitor) for place in self._places)