"""Shortest-path computation using Dijkstra's algorithm.

This module computes the shortest path between two cities of a
:class:`~cityroute.graph.store.Graph`. All working state (distances,
predecessors, frontier) is local to each call, so concurrent read-only
queries over a fully built graph do not interfere with each other.
"""

import heapq
from typing import Dict, List, Tuple

from ..domain.models import PathResult
from .store import Graph


def shortest_path(graph: Graph, start: str, end: str) -> PathResult:
    """Compute the shortest path between two cities using Dijkstra.

    Parameters
    ----------
    graph:
        City graph with non-negative edge weights.
    start:
        Departure city.
    end:
        Arrival city.

    Returns
    -------
    PathResult
        The sequence of cities from ``start`` to ``end`` (inclusive) and
        the total distance. If no path exists, returns
        ``PathResult.unreachable()``. Unknown cities are treated as
        unreachable, never as errors.
    """
    if start == end:
        return PathResult(path=(start,), distance=0)

    if start not in graph:
        return PathResult.unreachable()

    # A missing key means "not reached yet", i.e. infinite.
    distances: Dict[str, int] = {start: 0}
    previous: Dict[str, str] = {}

    heap: List[Tuple[int, str]] = [(0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry superseded by a shorter one pushed later.
        if current_distance > distances[u]:
            continue

        if u == end:
            break

        for edge in graph.get_neighbors(u):
            new_distance = current_distance + edge.weight
            best = distances.get(edge.to)
            if best is None or new_distance < best:
                distances[edge.to] = new_distance
                previous[edge.to] = u
                heapq.heappush(heap, (new_distance, edge.to))

    if end not in distances:
        return PathResult.unreachable()

    return PathResult(path=_reconstruct(previous, end), distance=distances[end])


def _reconstruct(previous: Dict[str, str], end: str) -> Tuple[str, ...]:
    path: List[str] = [end]
    current = end
    while current in previous:
        current = previous[current]
        path.append(current)

    path.reverse()
    return tuple(path)
