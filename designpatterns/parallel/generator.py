"""A generator that hands out the items of a sequence one at a time."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def generate(items: Iterable[T]) -> Iterator[T]:
    """Yield each item in order."""
    yield from items