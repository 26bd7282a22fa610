import pytest
from pydantic import ValidationError

from cityroute.config import BenchmarkConfig, GraphConfig, get_config, reset_config


def test_defaults():
    config = get_config()

    assert config.graph.routes_file == "routes.csv"
    assert config.graph.directed is False
    assert config.graph.strict is True
    assert config.benchmark.num_cities == 100_000
    assert config.benchmark.num_edges == 1_000_000
    assert config.benchmark.num_queries == 10
    assert config.observability.level == "WARNING"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CITYROUTE_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CITYROUTE_GRAPH_DIRECTED", "true")
    monkeypatch.setenv("CITYROUTE_BENCH_NUM_QUERIES", "3")
    monkeypatch.setenv("CITYROUTE_LOG_LEVEL", "DEBUG")
    reset_config()

    config = get_config()

    assert config.graph.routes_path == tmp_path / "routes.csv"
    assert config.graph.directed is True
    assert config.benchmark.num_queries == 3
    assert config.observability.level == "DEBUG"


def test_routes_path_joins_dir_and_file(tmp_path):
    config = GraphConfig(data_dir=tmp_path, routes_file="edges.csv")

    assert config.routes_path == tmp_path / "edges.csv"


@pytest.mark.parametrize("field", ["num_cities", "num_edges", "num_queries", "max_weight"])
def test_benchmark_sizes_must_be_positive(field):
    with pytest.raises(ValidationError):
        BenchmarkConfig(**{field: 0})
