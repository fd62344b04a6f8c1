"""A triangle of consecutive odd numbers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import count, islice
from typing import Optional

DEFAULT_ROWS = 5


def odd_triangle(rows: int = DEFAULT_ROWS) -> list[list[int]]:
    """Rows 1..rows, row i holding the next i odd numbers starting from 1."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    odds = count(1, 2)
    return [list(islice(odds, length)) for length in range(1, rows + 1)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dsalab-pattern", description="Print a triangle of odd numbers."
    )
    parser.add_argument("rows", nargs="?", type=int, default=DEFAULT_ROWS)
    args = parser.parse_args(argv)
    try:
        triangle = odd_triangle(args.rows)
    except ValueError as exc:
        parser.error(str(exc))
    for row in triangle:
        print("".join(f"  {number}" for number in row))
    return 0