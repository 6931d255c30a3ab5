"""Publish/subscribe: subscribers registered by event name, notified in threads."""

from __future__ import annotations

import threading
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Event:
    """A named event with an optional payload."""

    name: str
    data: Any = None


Subscriber = Callable[[Event], object]


class PubSub:
    """Delivers each published event to every subscriber of its name."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[Subscriber]] = defaultdict(list)
        self._lock = threading.RLock()

    def subscribe(self, event_name: str, subscriber: Subscriber) -> None:
        """Register ``subscriber`` for events called ``event_name``."""
        with self._lock:
            self._subscribers[event_name].append(subscriber)

    def publish(self, event: Event) -> list[threading.Thread]:
        """Call each subscriber of ``event.name`` in its own thread.

        Returns the started threads so the caller may wait for them.
        """
        with self._lock:
            subscribers = list(self._subscribers.get(event.name, ()))
        threads = [threading.Thread(target=sub, args=(event,), daemon=True) for sub in subscribers]
        for thread in threads:
            thread.start()
        return threads