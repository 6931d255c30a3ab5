"""Facade pattern: one object that hides the work of several subsystems."""

from __future__ import annotations

from dataclasses import dataclass, field


class House:
    def build(self) -> str:
        return "Build house"


class Tree:
    def grow(self) -> str:
        return "Tree grow"


@dataclass
class Man:
    """The facade: lists everything a man must do."""

    house: House = field(default_factory=House)
    tree: Tree = field(default_factory=Tree)

    def todo(self) -> str:
        """Return the tasks, one per line."""
        return "\n".join([self.house.build(), self.tree.grow()])