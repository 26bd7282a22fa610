"""CSV Graph Repository adapter.

This adapter wraps the graph loading logic and adds:
- Configuration injection (path, directedness, strictness)
- Caching of the loaded graph
- Logging and error wrapping
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...graph.load_graph import build_graph, iter_edge_records
from ...graph.store import Graph


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from a ``from,to,weight`` CSV file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (path, directedness, strictness)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the city graph from the routes file.

        Returns:
            The fully built graph.

        Raises:
            GraphError: If the routes file cannot be read.
            MalformedRecordError: If a record is invalid in strict mode.
        """
        if self._graph is not None:
            return self._graph

        routes_path = self.config.routes_path
        self._logger.debug(
            "Loading graph",
            extra={
                "routes_path": str(routes_path),
                "directed": self.config.directed,
                "strict": self.config.strict,
            },
        )

        try:
            with routes_path.open(newline="", encoding="utf-8") as f:
                graph = build_graph(
                    iter_edge_records(f, strict=self.config.strict),
                    directed=self.config.directed,
                )
        except OSError as e:
            raise GraphError(
                f"Failed to load graph: {e}",
                file_path=str(routes_path),
                cause=e,
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": graph.edge_count},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
