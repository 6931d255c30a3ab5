"""A processing pipeline of chained stream stages sharing one stop signal."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator


def generate(done: threading.Event, numbers: Iterable[int]) -> Iterator[int]:
    """Yield ``numbers`` one by one, stopping early once ``done`` is set."""
    for number in numbers:
        if done.is_set():
            return
        yield number


def add_two(done: threading.Event, source: Iterable[int]) -> Iterator[int]:
    """Yield every value of ``source`` increased by 2."""
    for value in source:
        if done.is_set():
            return
        yield value + 2


def filter_even(done: threading.Event, source: Iterable[int]) -> Iterator[int]:
    """Yield only the even values of ``source``."""
    for value in source:
        if value % 2 == 0:
            if done.is_set():
                return
            yield value


def check_six(done: threading.Event, source: Iterable[int]) -> Iterator[int]:
    """Pass values through until a 6 appears, then set ``done`` to stop every stage."""
    for value in source:
        if value == 6:
            done.set()
            return
        yield value