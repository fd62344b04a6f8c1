"""A stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class BoundedStack:
    """Last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("Stack Is Full...Cannot Push")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("Stack is Empty...Cannot Pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise IndexError("Stack is Empty. No Top Element")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"