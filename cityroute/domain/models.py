"""Immutable domain models for the city route planner.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts shared by the graph
store, the shortest-path engine and the adapters around them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Edge:
    """An outgoing edge stored in the adjacency list of its source city.

    Attributes:
        to: Destination city
        weight: Distance from the source city to ``to``
    """

    to: str
    weight: int


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A single parsed ``from,to,weight`` ingestion line."""

    source: str
    target: str
    weight: int


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    ``distance`` is ``None`` when the arrival city cannot be reached; in
    that case ``path`` is empty. No numeric ceiling stands in for
    infinity, so an unreachable result can never be confused with a long
    but real route.

    Attributes:
        path: Ordered tuple of cities from departure to arrival, inclusive
        distance: Total weight of the path, or None if unreachable
    """

    path: tuple[str, ...]
    distance: Optional[int]

    @classmethod
    def unreachable(cls) -> PathResult:
        """Build the "no path" result."""
        return cls(path=(), distance=None)

    @property
    def is_reachable(self) -> bool:
        """Check if a route was found."""
        return self.distance is not None

    @property
    def num_stops(self) -> int:
        """Return the number of cities in the route."""
        return len(self.path)

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return max(len(self.path) - 1, 0)
