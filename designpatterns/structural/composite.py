"""Composite pattern: menus built from leaves and nested submenus."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Any menu element."""

    @abstractmethod
    def operation(self) -> str:
        """Render the element."""


class Leaf(Component):
    """A single menu item."""

    def __init__(self, name: str) -> None:
        self.name = name

    def operation(self) -> str:
        return f"Leaf: {self.name}"


class Composite(Component):
    """A menu holding other components."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.children: list[Component] = []

    def add(self, component: Component) -> None:
        """Append a child component."""
        self.children.append(component)

    def operation(self) -> str:
        header = f"Composite: {self.name}\n"
        return header + "".join(f"  {child.operation()}\n" for child in self.children)