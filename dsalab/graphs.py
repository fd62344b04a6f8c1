"""Single-source shortest paths with the Bellman-Ford algorithm."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

INFINITY = 999
"""Weight meaning "no edge", and the distance reported for unreachable vertices."""

SAMPLE_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (0, 6, 8, 999),
    (999, 0, -6, 999),
    (999, 999, 0, 8),
    (999, 999, 999, 0),
)


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from one source vertex."""

    source: int
    distances: tuple[int, ...]
    predecessors: tuple[Optional[int], ...]

    def path(self, vertex: int) -> list[int]:
        """Vertices on the route from the source to ``vertex``."""
        if not 0 <= vertex < len(self.distances):
            raise IndexError(f"no vertex {vertex}")
        route: list[int] = []
        current: Optional[int] = vertex
        while current is not None:
            route.append(current)
            current = self.predecessors[current]
        route.reverse()
        return route


def bellman_ford(weights: Sequence[Sequence[int]], source: int) -> ShortestPaths:
    """Shortest paths from ``source`` over an adjacency matrix.

    Entries equal to INFINITY, and the diagonal, are not edges.
    Raises ValueError if a negative-weight cycle is reachable.
    """
    rows = [list(row) for row in weights]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("weight matrix must be square")
    if not 0 <= source < size:
        raise IndexError(f"no vertex {source}")

    edges = [
        (u, v, weight)
        for u, row in enumerate(rows)
        for v, weight in enumerate(row)
        if u != v and weight != INFINITY
    ]
    dist: list[float] = [math.inf] * size
    pred: list[Optional[int]] = [None] * size
    dist[source] = 0

    for _ in range(size - 1):
        changed = False
        for u, v, weight in edges:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                pred[v] = u
                changed = True
        if not changed:
            break
    if any(dist[u] + weight < dist[v] for u, v, weight in edges):
        raise ValueError("graph contains a negative-weight cycle")

    return ShortestPaths(
        source=source,
        distances=tuple(int(d) if math.isfinite(d) else INFINITY for d in dist),
        predecessors=tuple(pred),
    )


def _label(vertex: int) -> str:
    return chr(ord("A") + vertex)


def format_report(result: ShortestPaths) -> str:
    """One line per vertex with its route and cost."""
    lines = []
    for vertex, cost in enumerate(result.distances):
        route = " ".join(_label(v) for v in result.path(vertex))
        lines.append(f"{_label(vertex)} - {route} Destination Reached. Cost = {cost}")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dsalab-bellman-ford",
        description="Shortest paths over the sample four-vertex graph.",
    )
    parser.add_argument("--source", default="A", help="source vertex letter")
    args = parser.parse_args(argv)
    source = ord(args.source.upper()) - ord("A") if len(args.source) == 1 else -1
    if not 0 <= source < len(SAMPLE_WEIGHTS):
        parser.error(f"unknown vertex {args.source!r}")
    print(format_report(bellman_ford(SAMPLE_WEIGHTS, source)), end="")
    return 0