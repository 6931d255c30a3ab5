"""Command pattern: a remote control issuing on/off commands to a device."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Command(ABC):
    """An action that can be executed later."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""


class Device(ABC):
    """Something that can be switched on and off."""

    @abstractmethod
    def on(self) -> None:
        """Switch the device on."""

    @abstractmethod
    def off(self) -> None:
        """Switch the device off."""


class TV(Device):
    """A television, the receiver of commands."""

    def __init__(self) -> None:
        self.is_running = False

    def on(self) -> None:
        self.is_running = True
        print("Device включен.")

    def off(self) -> None:
        self.is_running = False
        print("Device выключен.")


@dataclass
class DeviceOnCommand(Command):
    """Switches its device on."""

    device: Device

    def execute(self) -> None:
        self.device.on()


@dataclass
class DeviceOffCommand(Command):
    """Switches its device off."""

    device: Device

    def execute(self) -> None:
        self.device.off()


@dataclass
class RemoteControl:
    """Holds one command and executes it on request."""

    command: Command | None = None

    def execute_command(self) -> None:
        """Run the current command, or report that none is set."""
        if self.command is not None:
            self.command.execute()
        else:
            print("Команда не установлена.")