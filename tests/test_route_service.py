from __future__ import annotations

from dataclasses import dataclass

import pytest

from cityroute.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from cityroute.config import AppConfig, GraphConfig
from cityroute.container import Container
from cityroute.domain.errors import NoRouteFoundError
from cityroute.graph.store import Graph
from cityroute.ports.graph import GraphRepositoryPort, RouteSolverPort
from cityroute.services import RouteService


@dataclass
class InMemoryRepository:
    graph: Graph
    loads: int = 0

    def load(self) -> Graph:
        self.loads += 1
        return self.graph


@pytest.fixture
def repository() -> InMemoryRepository:
    graph = Graph(directed=False)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 5)
    graph.add_edge("X", "Y", 1)
    return InMemoryRepository(graph)


def test_find_route(repository):
    service = RouteService(repository, DijkstraRouteSolver())

    result = service.find_route("A", "C")

    assert result.path == ("A", "B", "C")
    assert result.distance == 3
    assert repository.loads == 1


def test_find_route_uses_names_verbatim(repository):
    service = RouteService(repository, DijkstraRouteSolver())

    assert not service.find_route(" A ", "C").is_reachable


def test_find_route_or_raise(repository):
    service = RouteService(repository, DijkstraRouteSolver())

    with pytest.raises(NoRouteFoundError) as excinfo:
        service.find_route_or_raise("A", "Y")

    assert excinfo.value.departure == "A"
    assert excinfo.value.arrival == "Y"


def test_describe_route(repository):
    service = RouteService(repository, DijkstraRouteSolver())

    assert service.describe_route("C", "A") == (
        "Shortest route: C -> B -> A\nShortest distance: 3"
    )
    assert service.describe_route("A", "X") == (
        "No path found\nShortest distance: unreachable"
    )


def test_container_wires_default_service(routes_csv):
    config = AppConfig(
        graph=GraphConfig(data_dir=routes_csv.parent, routes_file=routes_csv.name)
    )
    container = Container.create_default(config)

    service = container.resolve(RouteService)

    assert isinstance(service.graph_repository, CSVGraphRepository)
    assert isinstance(service.route_solver, DijkstraRouteSolver)
    assert container.resolve(GraphRepositoryPort) is service.graph_repository
    assert service.find_route("A", "C").distance == 3


def test_container_register_override(repository):
    container = Container()
    container.register(GraphRepositoryPort, lambda: repository)
    container.register(RouteSolverPort, DijkstraRouteSolver, singleton=False)

    assert container.resolve(GraphRepositoryPort) is repository
    assert container.resolve(RouteSolverPort) is not container.resolve(RouteSolverPort)
    assert container.is_registered(RouteSolverPort)
    assert not container.is_registered(RouteService)

    with pytest.raises(KeyError):
        container.resolve(RouteService)
