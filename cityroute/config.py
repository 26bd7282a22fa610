"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- CITYROUTE_GRAPH_DATA_DIR=/path/to/data
- CITYROUTE_GRAPH_DIRECTED=true
- CITYROUTE_BENCH_NUM_CITIES=5000
- CITYROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CITYROUTE_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    routes_file: str = "routes.csv"
    directed: bool = False
    strict: bool = True  # Abort loading on a non-integer distance

    @property
    def routes_path(self) -> Path:
        """Full path to the routes CSV file."""
        return self.data_dir / self.routes_file


class BenchmarkConfig(BaseSettings):
    """Random-graph benchmark configuration.

    Environment variables prefixed with CITYROUTE_BENCH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_BENCH_")

    num_cities: int = 100_000
    num_edges: int = 1_000_000
    num_queries: int = 10
    max_weight: int = 1000
    seed: Optional[int] = None

    @field_validator("num_cities", "num_edges", "num_queries", "max_weight")
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes_path)
        print(config.benchmark.num_queries)

    Environment variables prefixed with CITYROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYROUTE_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
