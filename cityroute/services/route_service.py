"""Route service - Main orchestrator.

Loads the city graph through a repository and runs queries through a
route solver, both injected as ports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import NoRouteFoundError
from ..domain.models import PathResult
from ..io.output_text import format_route
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RouteService:
    """Main service for answering route queries.

    The graph is loaded lazily on the first query; the repository is
    responsible for caching it.

    Attributes:
        graph_repository: Loads the city graph
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_route(self, departure: str, arrival: str) -> PathResult:
        """Compute the shortest route between two cities.

        Raises:
            GraphError: If the graph cannot be loaded.
            MalformedRecordError: If the routes file is invalid in strict mode.
        """
        self._logger.info(
            "Starting route query",
            extra={"departure": departure, "arrival": arrival},
        )
        graph = self.graph_repository.load()
        return self.route_solver.solve(graph, departure, arrival)

    def find_route_or_raise(self, departure: str, arrival: str) -> PathResult:
        """Like find_route(), but raise NoRouteFoundError when unreachable."""
        result = self.find_route(departure, arrival)
        if not result.is_reachable:
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )
        return result

    def describe_route(self, departure: str, arrival: str) -> str:
        return format_route(self.find_route(departure, arrival))
