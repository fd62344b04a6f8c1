"""A circular singly linked list tracked through its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node = field(init=False)

    def __post_init__(self) -> None:
        self.next = self


class CircularList:
    """Circular linked list; the last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _link(self, value: Any) -> _Node:
        node = _Node(value)
        if self._last is None:
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1
        return node

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` before the first element."""
        self._link(value)

    def insert_at_end(self, value: Any) -> None:
        """Put ``value`` after the last element."""
        self._last = self._link(value)

    def _require_items(self) -> _Node:
        if self._last is None:
            raise IndexError("List is empty. Cannot delete.")
        return self._last

    def _unlink_after(self, prev: _Node) -> Any:
        node = prev.next
        if node is prev:
            self._last = None
        else:
            prev.next = node.next
            if node is self._last:
                self._last = prev
        self._size -= 1
        return node.value

    def delete_from_beginning(self) -> Any:
        """Remove and return the first element."""
        return self._unlink_after(self._require_items())

    def delete_from_end(self) -> Any:
        """Remove and return the last element."""
        last = self._require_items()
        prev = last
        while prev.next is not last:
            prev = prev.next
        return self._unlink_after(prev)

    def delete_item(self, value: Any) -> None:
        """Remove the first element equal to ``value``."""
        prev = self._require_items()
        for _ in range(self._size):
            if prev.next.value == value:
                self._unlink_after(prev)
                return
            prev = prev.next
        raise ValueError(f"Item {value!r} not found.")

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        first = self._last.next
        node = first
        while True:
            yield node.value
            node = node.next
            if node is first:
                break

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"