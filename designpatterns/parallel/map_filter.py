"""Map and filter stages over streams of integers, with a stop signal."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator


def generate(done: threading.Event, numbers: Iterable[int]) -> Iterator[int]:
    """Yield ``numbers`` one by one, stopping early once ``done`` is set."""
    for number in numbers:
        if done.is_set():
            return
        yield number


def map_stream(
    done: threading.Event,
    source: Iterable[int],
    mapper: Callable[[int], int],
) -> Iterator[int]:
    """Yield ``mapper(value)`` for every value of ``source``."""
    iterator = iter(source)
    while True:
        if done.is_set():
            print("Получен сигнал завершения, выходим из Map")
            return
        try:
            value = next(iterator)
        except StopIteration:
            print("inputCh закрыт, выходим из Map")
            return
        yield mapper(value)


def filter_stream(
    done: threading.Event,
    source: Iterable[int],
    predicate: Callable[[int], bool],
) -> Iterator[int]:
    """Yield the values of ``source`` that satisfy ``predicate``."""
    iterator = iter(source)
    while True:
        if done.is_set():
            print("Получен сигнал завершения, выходим из Filter")
            return
        try:
            value = next(iterator)
        except StopIteration:
            print("inputCh закрыт, выходим из Filter")
            return
        if predicate(value):
            yield value