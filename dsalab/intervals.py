"""Total length covered by a set of possibly overlapping intervals."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort intervals and merge those that overlap or touch."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return [(start, end) for start, end in merged]


def covered_length(intervals: Iterable[tuple[int, int]]) -> int:
    """Sum of the lengths of the merged intervals."""
    return sum(end - start for start, end in merge_intervals(intervals))


class IntervalUnion:
    """Union of intervals maintained as intervals arrive."""

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []

    def add(self, left: int, right: int) -> None:
        """Add ``[left, right]``, merging with any interval it meets."""
        first = bisect_left(self._starts, left)
        if first > 0 and self._ends[first - 1] >= left:
            first -= 1
        last = first
        while last < len(self._starts) and self._starts[last] <= right:
            left = min(left, self._starts[last])
            right = max(right, self._ends[last])
            last += 1
        self._starts[first:last] = [left]
        self._ends[first:last] = [right]

    def total(self) -> int:
        """Total length covered."""
        return sum(end - start for start, end in self)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(list(zip(self._starts, self._ends)))

    def __repr__(self) -> str:
        return f"IntervalUnion({list(self)!r})"


def _read_intervals(text: str) -> list[tuple[int, int]]:
    tokens = text.split()
    if not tokens:
        raise ValueError("missing interval count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("interval count must not be negative")
    values = [int(token) for token in tokens[1 : 1 + 2 * count]]
    if len(values) < 2 * count:
        raise ValueError(f"expected {count} intervals")
    return list(zip(values[::2], values[1::2]))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dsalab-intervals",
        description="Read K and then K pairs 'L R' from standard input; "
        "print the total covered length.",
    )
    parser.add_argument(
        "--incremental",
        action="store_true",
        help="merge intervals as they are read instead of sorting them first",
    )
    args = parser.parse_args(argv)
    try:
        intervals = _read_intervals(sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.incremental:
        union = IntervalUnion()
        for left, right in intervals:
            union.add(left, right)
        print(union.total())
    else:
        print(covered_length(intervals))
    return 0