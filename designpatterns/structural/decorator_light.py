"""A minimal decorator that wraps a component's output in bold tags."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Component(ABC):
    """Something that produces a string."""

    @abstractmethod
    def operation(self) -> str:
        """Return the component's output."""


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "I am component!"


@dataclass
class ConcreteDecorator(Component):
    """Wraps the inner component's output in <strong> tags."""

    component: Component

    def operation(self) -> str:
        return "<strong>" + self.component.operation() + "</strong>"