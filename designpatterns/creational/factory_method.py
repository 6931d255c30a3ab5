"""Factory method: a creator that builds products by action name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    """Actions for which the creator can build a product."""

    A = "A"
    B = "B"


class Product(ABC):
    """Something the factory produces."""

    @abstractmethod
    def use(self) -> str:
        """Use the product and return its action."""


@dataclass
class ConcreteProductA(Product):
    action: str

    def use(self) -> str:
        return self.action


@dataclass
class ConcreteProductB(Product):
    action: str

    def use(self) -> str:
        return self.action


class Creator(ABC):
    """Declares the factory method."""

    @abstractmethod
    def create_product(self, action: Action | str) -> Product:
        """Build the product for ``action``."""


class ConcreteCreator(Creator):
    """Builds ConcreteProductA for action A and ConcreteProductB for action B."""

    def create_product(self, action: Action | str) -> Product:
        try:
            action = Action(action)
        except ValueError:
            raise ValueError("Unknown Action") from None
        if action is Action.A:
            return ConcreteProductA(action.value)
        return ConcreteProductB(action.value)


def new_creator() -> Creator:
    """Return the default creator."""
    return ConcreteCreator()