"""Abstract factory: sports brands producing matching shoes and shirts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Shoe:
    """A shoe with a brand logo and a size."""

    logo: str = ""
    size: int = 0


@dataclass
class Shirt:
    """A shirt with a size."""

    size: int = 0


class AdidasShoe(Shoe):
    pass


class AdidasShirt(Shirt):
    pass


class NikeShoe(Shoe):
    pass


class NikeShirt(Shirt):
    pass


class SportsFactory(ABC):
    """Produces a family of related products from one brand."""

    @abstractmethod
    def make_shoe(self) -> Shoe:
        """Create a shoe."""

    @abstractmethod
    def make_shirt(self) -> Shirt:
        """Create a shirt."""


class Adidas(SportsFactory):
    def make_shoe(self) -> Shoe:
        return AdidasShoe(logo="adidas", size=16)

    def make_shirt(self) -> Shirt:
        return AdidasShirt(size=16)


class Nike(SportsFactory):
    def make_shoe(self) -> Shoe:
        return NikeShoe(logo="nike", size=14)

    def make_shirt(self) -> Shirt:
        return NikeShirt(size=14)


def create_adidas_factory() -> SportsFactory:
    """Return a factory for Adidas products."""
    return Adidas()


def create_nike_factory() -> SportsFactory:
    """Return a factory for Nike products."""
    return Nike()