"""Proxy pattern: a surrogate that creates the real subject lazily and decorates it."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject(ABC):
    """Something that sends a message."""

    @abstractmethod
    def send(self) -> str:
        """Return the message."""


class RealSubject(Subject):
    def send(self) -> str:
        return "I’ll be back!"


class Proxy(Subject):
    """Creates the real subject on first use and wraps its message in bold."""

    def __init__(self, real_subject: Subject | None = None) -> None:
        self.real_subject = real_subject

    def send(self) -> str:
        if self.real_subject is None:
            self.real_subject = RealSubject()
        return "<strong>" + self.real_subject.send() + "</strong>"