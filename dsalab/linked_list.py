"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list that supports insertion and removal at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def delete_from_beginning(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("List is empty. Cannot delete.")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_from_end(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("List is empty. Cannot delete.")
        if self._head.next is None:
            value = self._head.value
            self._head = None
            self._size -= 1
            return value
        prev = self._head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        assert prev.next is not None
        value = prev.next.value
        prev.next = None
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"