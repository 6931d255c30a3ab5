"""A counting semaphore that limits how many threads use a resource at once."""

from __future__ import annotations

import threading


class Semaphore:
    """Allows at most ``max_requests`` holders at a time."""

    def __init__(self, max_requests: int) -> None:
        if max_requests < 0:
            raise ValueError("semaphore capacity must be >= 0")
        self.max_requests = max_requests
        self._slots = threading.BoundedSemaphore(max_requests) if max_requests else threading.Semaphore(0)
        self._bounded = max_requests > 0

    def acquire(self) -> None:
        """Take a slot, blocking until one is free."""
        self._slots.acquire()

    def release(self) -> None:
        """Give a slot back; raises ValueError if none is held."""
        if not self._bounded:
            raise ValueError("Semaphore released too many times")
        self._slots.release()

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()