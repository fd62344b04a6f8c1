"""Maximum and minimum of a sequence by divide and conquer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _max_min(items: list[Any], lo: int, hi: int) -> tuple[Any, Any]:
    if lo == hi:
        return items[lo], items[lo]
    if lo + 1 == hi:
        first, second = items[lo], items[hi]
        return (first, second) if first > second else (second, first)
    mid = (lo + hi) // 2
    left_max, left_min = _max_min(items, lo, mid)
    right_max, right_min = _max_min(items, mid + 1, hi)
    return (
        right_max if right_max > left_max else left_max,
        right_min if right_min < left_min else left_min,
    )


def max_min(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("max_min() arg is an empty sequence")
    return _max_min(items, 0, len(items) - 1)