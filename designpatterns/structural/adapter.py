"""Adapter pattern: an old printer used through a new printer interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class NewPrinter(ABC):
    """The interface clients expect."""

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message."""


class OldPrinter:
    """A legacy printer with its own method name."""

    def print_old_format(self, message: str) -> None:
        print("Old Printer:", message)


@dataclass
class Adapter(NewPrinter):
    """Makes an OldPrinter usable as a NewPrinter."""

    old_printer: OldPrinter = field(default_factory=OldPrinter)

    def print(self, message: str) -> None:
        self.old_printer.print_old_format(message)