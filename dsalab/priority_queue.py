"""A priority queue kept sorted by ascending priority."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterator
from operator import itemgetter
from typing import Any

_priority = itemgetter(1)


class PriorityQueue:
    """Queue where lower priority numbers come out first.

    Entries of equal priority leave in the order they were inserted.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[Any, int]] = []

    def insert(self, data: Any, priority: int) -> None:
        """Add ``data`` with the given ``priority``."""
        insort(self._entries, (data, priority), key=_priority)

    def remove(self) -> Any:
        """Remove and return the data at the front."""
        if not self._entries:
            raise IndexError("Queue is Empty.")
        data, _ = self._entries.pop(0)
        return data

    def is_empty(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[tuple[Any, int]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        if not self._entries:
            return "Empty List"
        return " ".join(f"<{data},{priority}>" for data, priority in self._entries)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._entries!r})"