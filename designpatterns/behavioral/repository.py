"""Repository pattern: user storage behind an abstract interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class User:
    """A user record; an ``id`` of 0 means not yet stored."""

    id: int = 0
    name: str = ""
    email: str = ""


class UserNotFoundError(LookupError):
    """Raised when no user has the requested id."""

    def __init__(self) -> None:
        super().__init__("user not found")


class UserRepository(ABC):
    """Access to stored users."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """Return the user with ``user_id``."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Store ``user``, assigning an id if it has none."""

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user with ``user_id``."""


class InMemoryUserRepository(UserRepository):
    """Keeps users in a dictionary, numbering new ones from 1."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1

    def find_by_id(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError() from None

    def save(self, user: User) -> None:
        if user.id == 0:
            user.id = self._next_id
            self._next_id += 1
        self._users[user.id] = user

    def delete(self, user_id: int) -> None:
        if user_id not in self._users:
            raise UserNotFoundError()
        del self._users[user_id]