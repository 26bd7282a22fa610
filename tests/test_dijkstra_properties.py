"""Property checks of the shortest-path engine on small random graphs."""

from __future__ import annotations

import random
from typing import Dict, Optional

import pytest

from cityroute.domain.errors import GraphError, NegativeWeightError
from cityroute.graph.dijkstra import shortest_path
from cityroute.graph.store import Graph

CITIES = ["A", "B", "C", "D", "E", "F"]


def _random_graph(seed: int, directed: bool) -> Graph:
    rng = random.Random(seed)
    graph = Graph(directed=directed)
    for city in CITIES:
        graph.add_node(city)
    for _ in range(rng.randint(0, 12)):
        graph.add_edge(rng.choice(CITIES), rng.choice(CITIES), rng.randint(0, 9))
    return graph


def _brute_force(graph: Graph, start: str, end: str) -> Optional[int]:
    """Cheapest simple path by exhaustive search."""
    best: Dict[str, Optional[int]] = {"cost": None}

    def walk(city: str, cost: int, seen: set[str]) -> None:
        if city == end:
            if best["cost"] is None or cost < best["cost"]:
                best["cost"] = cost
            return
        for edge in graph.get_neighbors(city):
            if edge.to not in seen:
                walk(edge.to, cost + edge.weight, seen | {edge.to})

    walk(start, 0, {start})
    return best["cost"]


def _walk_cost(graph: Graph, path: tuple[str, ...]) -> int:
    total = 0
    for source, target in zip(path, path[1:]):
        weights = [e.weight for e in graph.get_neighbors(source) if e.to == target]
        assert weights, f"no edge {source} -> {target}"
        total += min(weights)
    return total


@pytest.mark.parametrize("seed", range(25))
@pytest.mark.parametrize("directed", [True, False])
def test_distances_are_optimal_and_paths_are_valid_walks(seed, directed):
    graph = _random_graph(seed, directed)

    for start in CITIES:
        for end in CITIES:
            result = shortest_path(graph, start, end)
            expected = _brute_force(graph, start, end)

            assert result.distance == expected
            if expected is None:
                assert result.path == ()
                continue

            assert result.path[0] == start
            assert result.path[-1] == end
            assert _walk_cost(graph, result.path) == result.distance


@pytest.mark.parametrize("seed", range(5))
def test_repeated_queries_are_identical(seed):
    graph = _random_graph(seed, directed=False)

    first = [shortest_path(graph, s, e) for s in CITIES for e in CITIES]
    second = [shortest_path(graph, s, e) for s in CITIES for e in CITIES]

    assert first == second


def test_start_equals_end_for_every_city():
    graph = _random_graph(3, directed=True)

    for city in CITIES + ["Unknown"]:
        result = shortest_path(graph, city, city)
        assert result.path == (city,)
        assert result.distance == 0


def test_undirected_insertion_is_symmetric():
    graph = Graph(directed=False)
    graph.add_edge("A", "B", 6)

    forward = shortest_path(graph, "A", "B")
    backward = shortest_path(graph, "B", "A")

    assert forward.path == ("A", "B")
    assert backward.path == ("B", "A")
    assert forward.distance == backward.distance == 6


def test_negative_weight_is_rejected_before_insertion():
    graph = Graph(directed=False)

    with pytest.raises(NegativeWeightError) as excinfo:
        graph.add_edge("A", "B", -1)

    assert isinstance(excinfo.value, GraphError)
    assert excinfo.value.weight == -1
    assert len(graph) == 0
    assert graph.edge_count == 0
