"""Fan-out / fan-in: spread work over parallel workers and merge their output."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable, Iterator

_END = object()


def _drain(channel: queue.Queue) -> Iterator[int]:
    """Yield items from ``channel`` until the end marker arrives."""
    while (item := channel.get()) is not _END:
        yield item


def generate(done: threading.Event, numbers: Iterable[int]) -> Iterator[int]:
    """Yield ``numbers`` one by one, stopping early once ``done`` is set."""
    for number in numbers:
        if done.is_set():
            return
        yield number


def fan_out(
    done: threading.Event,
    source: Iterable[int],
    workers: int,
    delay: float = 1.0,
) -> list[Iterator[int]]:
    """Start ``workers`` threads that share ``source`` and add 1 to each value.

    Each worker spends ``delay`` seconds per value to imitate costly work.
    Returns one output stream per worker.
    """
    iterator = iter(source)
    lock = threading.Lock()

    def work(out: queue.Queue) -> None:
        try:
            while not done.is_set():
                with lock:
                    try:
                        number = next(iterator)
                    except StopIteration:
                        return
                time.sleep(delay)
                if done.is_set():
                    return
                out.put(number + 1)
        finally:
            out.put(_END)

    streams = []
    for _ in range(workers):
        out: queue.Queue = queue.Queue()
        threading.Thread(target=work, args=(out,), daemon=True).start()
        streams.append(_drain(out))
    return streams


def _merged(channel: queue.Queue, producers: int) -> Iterator[int]:
    remaining = producers
    while remaining:
        item = channel.get()
        if item is _END:
            remaining -= 1
        else:
            yield item


def fan_in(done: threading.Event, *sources: Iterable[int]) -> Iterator[int]:
    """Merge several streams into one, reading each in its own thread.

    The merged stream ends when every source is exhausted or ``done`` is set.
    """
    merged: queue.Queue = queue.Queue()

    def forward(source: Iterable[int]) -> None:
        try:
            for value in source:
                if done.is_set():
                    return
                merged.put(value)
        finally:
            merged.put(_END)

    for source in sources:
        threading.Thread(target=forward, args=(source,), daemon=True).start()
    return _merged(merged, len(sources))