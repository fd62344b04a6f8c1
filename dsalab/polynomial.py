"""Polynomials stored as ordered lists of (coefficient, exponent) terms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Polynomial:
    """A polynomial whose terms are kept in insertion order.

    Addition merges two polynomials whose terms are ordered by descending
    exponent, combining terms of equal exponent.
    """

    def __init__(self, terms: Iterable[tuple[int, int]] = ()) -> None:
        self._terms: list[tuple[int, int]] = []
        for coeff, exp in terms:
            self.insert_term(coeff, exp)

    def insert_term(self, coeff: int, exp: int) -> None:
        """Append the term ``coeff * x**exp``."""
        self._terms.append((coeff, exp))

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        mine, theirs = iter(self._terms), iter(other._terms)
        left, right = next(mine, None), next(theirs, None)
        while left is not None and right is not None:
            if left[1] == right[1]:
                result.insert_term(left[0] + right[0], left[1])
                left, right = next(mine, None), next(theirs, None)
            elif left[1] > right[1]:
                result.insert_term(*left)
                left = next(mine, None)
            else:
                result.insert_term(*right)
                right = next(theirs, None)
        for pending, remaining in ((left, mine), (right, theirs)):
            if pending is not None:
                result.insert_term(*pending)
                for term in remaining:
                    result.insert_term(*term)
        return result

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(list(self._terms))

    def __str__(self) -> str:
        parts: list[str] = []
        for position, (coeff, exp) in enumerate(self._terms):
            if position and coeff > 0:
                parts.append("+")
            parts.append(str(coeff) if exp == 0 else f"{coeff}x{exp}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"