"""Iterator pattern over a simple collection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Collection:
    """An ordered collection of arbitrary items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def add(self, item: Any) -> None:
        """Append an item."""
        self._items.append(item)

    def create_iterator(self) -> CollectionIterator:
        """Return a fresh iterator positioned at the first item."""
        return CollectionIterator(self._items)

    def __iter__(self) -> CollectionIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._items)


class CollectionIterator(Iterator[Any]):
    """Walks the items of a collection once, front to back."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items
        self._index = 0

    def has_next(self) -> bool:
        """Whether another item remains."""
        return self._index < len(self._items)

    def __iter__(self) -> CollectionIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        item = self._items[self._index]
        self._index += 1
        return item