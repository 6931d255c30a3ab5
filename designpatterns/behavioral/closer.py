"""A registry of shutdown callbacks that are run together at exit."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor

CloseFunc = Callable[[], object]


class ShutdownError(Exception):
    """Raised when one or more shutdown callbacks failed."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors = list(errors)
        details = "\n".join(f"[!] {error}" for error in self.errors)
        super().__init__(f"shutdown finished with error(s): \n{details}")


class Closer:
    """Collects close callbacks and runs them all, reporting every failure."""

    def __init__(self) -> None:
        self._funcs: list[CloseFunc] = []

    def add(self, *funcs: CloseFunc) -> None:
        """Register one or more callbacks."""
        self._funcs.extend(funcs)

    def close_all(self) -> None:
        """Run the callbacks in order; raise ShutdownError if any of them failed."""
        errors: list[BaseException] = []
        for func in self._funcs:
            try:
                func()
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise ShutdownError(errors)

    def close_concurrently(self) -> None:
        """Run all callbacks at once in threads, wait, and raise on any failure."""
        if not self._funcs:
            return
        with ThreadPoolExecutor(max_workers=len(self._funcs)) as pool:
            futures = [pool.submit(func) for func in self._funcs]
        errors = [exc for exc in (future.exception() for future in futures) if exc is not None]
        if errors:
            raise ShutdownError(errors)


_instance: Closer | None = None
_instance_lock = threading.Lock()


def get_instance() -> Closer:
    """Return the process-wide Closer, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Closer()
        return _instance