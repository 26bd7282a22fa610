"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the city network and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.store import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the city
    network from its edge records.
    """

    def load(self) -> Graph:
        """Load the city graph.

        Returns:
            The fully built graph.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes optimal paths through the city network.
    """

    def solve(self, graph: Graph, departure: str, arrival: str) -> PathResult:
        """Find the shortest path between two cities.

        Args:
            graph: The city graph.
            departure: Departure city.
            arrival: Arrival city.

        Returns:
            PathResult with path and distance, unreachable if no path.
        """
        ...
