"""Dijkstra Route Solver adapter.

This adapter wraps the Dijkstra implementation from graph/dijkstra.py
and adds logging plus an opt-in raising variant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError
from ...domain.models import PathResult
from ...graph.dijkstra import shortest_path
from ...graph.store import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, departure: str, arrival: str) -> PathResult:
        """Find the shortest path between two cities.

        Unknown cities are not an error: the result is simply
        unreachable.

        Args:
            graph: The city graph.
            departure: Departure city.
            arrival: Arrival city.

        Returns:
            PathResult with path and distance, unreachable if no path.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        result = shortest_path(graph, departure, arrival)

        if not result.is_reachable:
            self._logger.warning(
                "No route found",
                extra={
                    "departure": departure,
                    "arrival": arrival,
                    "departure_known": departure in graph,
                    "arrival_known": arrival in graph,
                },
            )
            return result

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": result.num_stops,
                "distance": result.distance,
            },
        )
        return result

    def solve_or_raise(self, graph: Graph, departure: str, arrival: str) -> PathResult:
        """Find the shortest path, raising when none exists.

        Raises:
            NoRouteFoundError: If ``arrival`` is unreachable from ``departure``.
        """
        result = self.solve(graph, departure, arrival)
        if not result.is_reachable:
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )
        return result
