"""Graph-related utilities for representing the city network.

This subpackage contains the adjacency store, the loaders that build
it from ``from,to,weight`` records, and the shortest-path algorithm
that runs on top of it.
"""

from .dijkstra import shortest_path
from .load_graph import build_graph, iter_edge_records, load_graph, parse_edge_line
from .store import Graph

__all__ = [
    "Graph",
    "shortest_path",
    "parse_edge_line",
    "iter_edge_records",
    "build_graph",
    "load_graph",
]
