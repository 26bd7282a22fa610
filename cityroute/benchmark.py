"""Random-graph benchmark for the shortest-path engine.

Builds a large random city network, then times a batch of random
queries against it. Cities are named ``C00001``, ``C00002``, ...
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .config import BenchmarkConfig, get_config
from .domain.errors import ConfigurationError
from .graph.dijkstra import shortest_path
from .graph.store import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryTiming:
    """Outcome of a single timed query."""

    start: str
    end: str
    found: bool
    num_stops: int
    distance: Optional[int]
    elapsed_ms: float


@dataclass
class BenchmarkReport:
    """Summary of a benchmark run.

    Attributes:
        directed: Whether the generated graph was directed
        num_nodes: Cities that ended up in the graph
        num_edges: Directed edge records stored in the graph
        queries: Per-query timings, in execution order
    """

    directed: bool
    num_nodes: int
    num_edges: int
    queries: List[QueryTiming] = field(default_factory=list)

    @property
    def total_queries(self) -> int:
        return len(self.queries)

    @property
    def successful_paths(self) -> int:
        # A path of one city is only a self query, not a route.
        return sum(1 for q in self.queries if q.found and q.num_stops > 1)

    @property
    def total_ms(self) -> float:
        return sum(q.elapsed_ms for q in self.queries)

    @property
    def average_ms(self) -> float:
        if not self.queries:
            return 0.0
        return self.total_ms / len(self.queries)


def city_names(num_cities: int) -> List[str]:
    return [f"C{i:05d}" for i in range(1, num_cities + 1)]


def generate_graph(
    num_cities: int,
    num_edges: int,
    directed: bool,
    max_weight: int = 1000,
    rng: Optional[random.Random] = None,
) -> Graph:
    """Generate a random graph.

    ``num_edges`` random pairs are drawn; self-loops are dropped, so the
    resulting graph may hold fewer edges. Weights are uniform in
    ``[1, max_weight]``.
    """
    rng = rng or random.Random()
    cities = city_names(num_cities)
    graph = Graph(directed=directed)

    for _ in range(num_edges):
        source = rng.choice(cities)
        target = rng.choice(cities)
        if source == target:
            continue
        graph.add_edge(source, target, rng.randint(1, max_weight))

    return graph


def run_benchmark(
    directed: bool,
    config: Optional[BenchmarkConfig] = None,
) -> BenchmarkReport:
    """Build a random graph and time random shortest-path queries.

    Raises:
        ConfigurationError: If the sizes are not usable.
    """
    config = config or get_config().benchmark
    if config.num_cities < 2:
        raise ConfigurationError(
            "Benchmark needs at least two cities",
            setting_name="num_cities",
            expected_type="int >= 2",
        )

    rng = random.Random(config.seed)
    cities = city_names(config.num_cities)

    build_start = time.perf_counter()
    graph = generate_graph(
        config.num_cities,
        config.num_edges,
        directed,
        max_weight=config.max_weight,
        rng=rng,
    )
    logger.info(
        "Benchmark graph built",
        extra={
            "directed": directed,
            "nodes": len(graph),
            "edges": graph.edge_count,
            "build_ms": (time.perf_counter() - build_start) * 1000,
        },
    )

    report = BenchmarkReport(
        directed=directed,
        num_nodes=len(graph),
        num_edges=graph.edge_count,
    )

    for _ in range(config.num_queries):
        start = rng.choice(cities)
        end = rng.choice(cities)

        started = time.perf_counter()
        result = shortest_path(graph, start, end)
        elapsed_ms = (time.perf_counter() - started) * 1000

        report.queries.append(
            QueryTiming(
                start=start,
                end=end,
                found=result.is_reachable,
                num_stops=result.num_stops,
                distance=result.distance,
                elapsed_ms=elapsed_ms,
            )
        )

    return report
