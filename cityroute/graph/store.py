"""In-memory adjacency store for the city network.

Each city maps to the list of its outgoing edges. In undirected mode a
single ``add_edge`` call stores the edge in both directions.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Sequence, Tuple

from ..domain.errors import NegativeWeightError
from ..domain.models import Edge, EdgeRecord


class Graph:
    """Weighted city graph backed by an adjacency list.

    The graph is built once through repeated ``add_edge`` calls and then
    queried any number of times. It is not safe to mutate it while a
    shortest-path query is running.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: Dict[str, List[Edge]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    def add_node(self, city: str) -> None:
        """Register ``city`` if it is not already known."""
        self._adjacency.setdefault(city, [])

    def add_edge(self, source: str, target: str, weight: int = 1) -> None:
        """Add an edge between two cities.

        Both endpoints are registered as nodes. Self-loops and parallel
        edges are accepted; relaxation picks the cheapest one.

        Raises:
            NegativeWeightError: If ``weight`` is negative.
        """
        if weight < 0:
            raise NegativeWeightError(
                f"Negative weight on edge {source} -> {target}: {weight}",
                source=source,
                target=target,
                weight=weight,
            )

        self.add_node(source)
        self.add_node(target)

        self._adjacency[source].append(Edge(to=target, weight=weight))
        if not self._directed:
            self._adjacency[target].append(Edge(to=source, weight=weight))

    def add_record(self, record: EdgeRecord) -> None:
        self.add_edge(record.source, record.target, record.weight)

    def get_neighbors(self, city: str) -> Sequence[Edge]:
        """Return the outgoing edges of ``city``, empty if it is unknown."""
        return self._adjacency.get(city, ())

    @property
    def nodes(self) -> Tuple[str, ...]:
        return tuple(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of stored directed edge records."""
        return sum(len(edges) for edges in self._adjacency.values())

    def edges(self) -> Iterator[Tuple[str, Edge]]:
        for source, outgoing in self._adjacency.items():
            for edge in outgoing:
                yield source, edge

    def __contains__(self, city: object) -> bool:
        return city in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={len(self)}, edges={self.edge_count})"
