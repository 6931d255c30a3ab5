"""Future/promise: run a task in the background and collect its result later."""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import TypeVar

T = TypeVar("T")


def promise(task: Callable[[], T]) -> Future[T]:
    """Start ``task`` in a thread and return a future for its value or error."""
    future: Future[T] = Future()
    future.set_running_or_notify_cancel()

    def run() -> None:
        try:
            value = task()
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(value)

    threading.Thread(target=run, daemon=True).start()
    return future