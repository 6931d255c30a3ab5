"""Decorator pattern: wrappers that transform a component's output."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Something that produces a string."""

    @abstractmethod
    def operation(self) -> str:
        """Return the component's output."""


class ConcreteComponent(Component):
    """Returns a fixed message."""

    def __init__(self, message: str) -> None:
        self.message = message

    def operation(self) -> str:
        return self.message


class BaseDecorator(Component):
    """Wraps a component and passes its output through unchanged."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def operation(self) -> str:
        return self.component.operation()


class UpperCaseDecorator(BaseDecorator):
    """Upper-cases the wrapped output."""

    def operation(self) -> str:
        return self.component.operation().upper()


class TrimDecorator(BaseDecorator):
    """Strips surrounding whitespace from the wrapped output."""

    def operation(self) -> str:
        return self.component.operation().strip()