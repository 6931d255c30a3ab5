"""Builder pattern: a director assembling a house step by step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class House:
    """The finished product."""

    window_type: str = ""
    door_type: str = ""
    floor: int = 0


class HouseBuilder(ABC):
    """Builds the parts of a house."""

    @abstractmethod
    def build_window(self) -> None:
        """Choose the windows."""

    @abstractmethod
    def build_door(self) -> None:
        """Choose the door."""

    @abstractmethod
    def build_floors(self) -> None:
        """Choose the number of floors."""

    @abstractmethod
    def house(self) -> House:
        """Return the house built so far."""


class NormalBuilder(HouseBuilder):
    """Builds an ordinary two-storey wooden house."""

    def __init__(self) -> None:
        self._window_type = ""
        self._door_type = ""
        self._floor = 0

    def build_window(self) -> None:
        self._window_type = "Wooden Window"

    def build_door(self) -> None:
        self._door_type = "Wooden Door"

    def build_floors(self) -> None:
        self._floor = 2

    def house(self) -> House:
        return House(
            window_type=self._window_type,
            door_type=self._door_type,
            floor=self._floor,
        )


@dataclass
class Director:
    """Runs the building steps in a fixed order with the current builder."""

    builder: HouseBuilder

    def build_house(self) -> House:
        """Build door, windows and floors, then return the house."""
        self.builder.build_door()
        self.builder.build_window()
        self.builder.build_floors()
        return self.builder.house()