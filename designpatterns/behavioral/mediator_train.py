"""Mediator pattern: a station manager that lets one train at a time use the platform."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque


class Mediator(ABC):
    """Coordinates trains competing for the platform."""

    @abstractmethod
    def can_arrive(self, train: Train) -> bool:
        """Grant the platform to ``train`` or queue it."""

    @abstractmethod
    def notify_about_departure(self) -> None:
        """Free the platform and admit the next queued train."""


class Train:
    """A train that asks its mediator before using the platform."""

    name = "Train"
    permit_message = "Arrival permitted"

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def arrive(self) -> None:
        """Arrive if the platform is free, otherwise wait in the queue."""
        if not self.mediator.can_arrive(self):
            print(f"{self.name}: Arrival blocked, waiting")
            return
        print(f"{self.name}: Arrived")

    def depart(self) -> None:
        """Leave the platform and tell the mediator."""
        print(f"{self.name}: Leaving")
        self.mediator.notify_about_departure()

    def permit_arrival(self) -> None:
        """Called by the mediator when this train may arrive."""
        print(f"{self.name}: {self.permit_message}")
        self.arrive()


class PassengerTrain(Train):
    """A passenger train."""

    name = "PassengerTrain"
    permit_message = "Arrival permitted, arriving"


class FreightTrain(Train):
    """A freight train."""

    name = "FreightTrain"
    permit_message = "Arrival permitted"


class StationManager(Mediator):
    """Keeps one platform and a first-come queue of waiting trains."""

    def __init__(self) -> None:
        self.is_platform_free = True
        self.train_queue: deque[Train] = deque()

    def can_arrive(self, train: Train) -> bool:
        if self.is_platform_free:
            self.is_platform_free = False
            return True
        self.train_queue.append(train)
        return False

    def notify_about_departure(self) -> None:
        self.is_platform_free = True
        if self.train_queue:
            self.train_queue.popleft().permit_arrival()