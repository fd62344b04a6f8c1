"""A linear array queue with a fixed number of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class BoundedQueue:
    """First-in first-out queue over ``capacity`` slots.

    Slots are not reused: once ``capacity`` items have been enqueued the
    queue reports full, even after items have been dequeued.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("Queue is Full...cannot Insert")
        self._slots.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise IndexError("Queue is Empty..Cannot Dequeue")
        item = self._slots[self._front]
        self._front += 1
        return item

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise IndexError("Queue is Empty. No Top Element")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self.capacity}, items={list(self)!r})"