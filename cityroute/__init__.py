"""Top-level package for the cityroute project.

Shortest routes between cities: an adjacency-list graph store, a
Dijkstra shortest-path engine, and the loaders, adapters and CLI
that sit around them.
"""

from .domain.models import Edge, EdgeRecord, PathResult
from .graph.dijkstra import shortest_path
from .graph.store import Graph

__version__ = "0.1.0"

__all__ = ["Edge", "EdgeRecord", "Graph", "PathResult", "shortest_path"]
