"""Generic bag container."""

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class ArrayBag(Generic[T]):
    """Unordered collection of unique items with an optional capacity.

    Items are compared by value. Removal compacts the underlying storage, so
    no gaps remain; the order of items is incidental.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int | None:
        """Maximum number of items, or None when unbounded."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def is_empty(self) -> bool:
        """Return True when the bag holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no further items fit."""
        return self._capacity is not None and len(self._items) >= self._capacity

    def add(self, item: T) -> bool:
        """Add an item unless it is already present or the bag is full."""
        if self.is_full() or item in self._items:
            return False
        self._items.append(item)
        return True

    def remove(self, item: T) -> bool:
        """Remove the first item equal to the given one."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def remove_where(self, predicate: Callable[[T], bool]) -> list[T]:
        """Remove every item matching the predicate and return them."""
        removed: list[T] = []
        kept: list[T] = []
        for item in self._items:
            (removed if predicate(item) else kept).append(item)
        self._items = kept
        return removed

    def contains(self, item: T) -> bool:
        """Return True if an equal item is in the bag."""
        return item in self._items

    def frequency_of(self, item: T) -> int:
        """Return how many items equal the given one."""
        return self._items.count(item)

    def clear(self) -> None:
        """Remove all items."""
        self._items = []

    def to_list(self) -> list[T]:
        """Return a copy of the contained items."""
        return list(self._items)
