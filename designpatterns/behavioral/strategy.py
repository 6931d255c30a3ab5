"""Strategy pattern: interchangeable price calculations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PriceStrategy(ABC):
    """A way of turning a base price into a final price."""

    @abstractmethod
    def calculate_price(self, base_price: float) -> float:
        """Return the final price for ``base_price``."""


class ConcreteStrategyA(PriceStrategy):
    """No tax."""

    def calculate_price(self, base_price: float) -> float:
        return base_price


class ConcreteStrategyB(PriceStrategy):
    """10% tax."""

    def calculate_price(self, base_price: float) -> float:
        return base_price * 1.10


class ConcreteStrategyC(PriceStrategy):
    """20% tax."""

    def calculate_price(self, base_price: float) -> float:
        return base_price * 1.20


@dataclass
class Context:
    """Computes prices with whichever strategy is currently set."""

    strategy: PriceStrategy | None = None

    def calculate(self, base_price: float) -> float:
        """Apply the current strategy; raises ValueError if none is set."""
        if self.strategy is None:
            raise ValueError("no price strategy set")
        return self.strategy.calculate_price(base_price)