"""Singleton pattern: lazily created, thread-safe single instances."""

from __future__ import annotations

import threading


class Singleton:
    """The type shared through get_instance_light and its verbose variant."""


class Single:
    """The type shared through get_instance_mutex."""


_instance: Singleton | None = None
_instance_lock = threading.Lock()

_single_instance: Single | None = None
_single_lock = threading.Lock()


def get_instance_light() -> Singleton:
    """Return the shared Singleton, creating it exactly once."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Singleton()
    return _instance


def get_instance_light_verbose() -> Singleton:
    """Like get_instance_light, but report whether the instance was just created."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                print("Creating single instance now.")
                _instance = Singleton()
    else:
        print("Single instance already created.")
    return _instance


def get_instance_mutex() -> Single:
    """Return the shared Single using double-checked locking, reporting each call."""
    global _single_instance
    if _single_instance is None:
        with _single_lock:
            if _single_instance is None:
                print("Creating single instance now.")
                _single_instance = Single()
            else:
                print("Single instance already created.")
    else:
        print("Single instance already created.")
    return _single_instance