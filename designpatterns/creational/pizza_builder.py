"""Builder pattern: a fluent builder for pizzas."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Pizza:
    """A pizza with a size, a dough and a list of toppings."""

    size: str = ""
    dough: str = ""
    toppings: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        toppings = " ".join(self.toppings)
        return f"Pizza [Size: {self.size}, Dough: {self.dough}, Toppings: [{toppings}]]"


class PizzaBuilder:
    """Configures a pizza through chainable calls."""

    def __init__(self) -> None:
        self._pizza = Pizza()

    def set_size(self, size: str) -> PizzaBuilder:
        self._pizza.size = size
        return self

    def set_dough(self, dough: str) -> PizzaBuilder:
        self._pizza.dough = dough
        return self

    def add_topping(self, topping: str) -> PizzaBuilder:
        self._pizza.toppings.append(topping)
        return self

    def build(self) -> Pizza:
        """Return the pizza being built."""
        return self._pizza