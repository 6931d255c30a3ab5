"""Bridge pattern: a car decoupled from the engine that gives it its sound."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Engine(ABC):
    """An engine that makes a sound."""

    @abstractmethod
    def sound(self) -> str:
        """Return the engine's sound."""


class EngineSuzuki(Engine):
    def sound(self) -> str:
        return "SssuuuuZzzuuuuKkiiiii"


class EngineHonda(Engine):
    def sound(self) -> str:
        return "HhoooNnnnnnnnnDddaaaaaaa"


class EngineLada(Engine):
    def sound(self) -> str:
        return "PhhhhPhhhhPhPhPhPhPh"


@dataclass
class Car:
    """A car that races with whatever engine it was given."""

    engine: Engine

    def race(self) -> str:
        """Return the sound of the car racing."""
        return self.engine.sound()