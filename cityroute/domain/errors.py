"""Typed domain errors for the city route planner.

All errors inherit from CityRouteError and can optionally wrap a root
cause exception for debugging.

Unknown cities are not errors: queries against them produce an
unreachable PathResult. Exceptions are reserved for broken input data,
invalid configuration and the explicit ``*_or_raise`` helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityRouteError(Exception):
    """Base error for the city route domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(CityRouteError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NegativeWeightError(GraphError):
    """An edge with a negative weight was inserted.

    Dijkstra's algorithm only returns correct distances for non-negative
    weights, so the graph store rejects these before storing anything.
    """

    source: str = ""
    target: str = ""
    weight: int = 0


@dataclass
class MalformedRecordError(CityRouteError):
    """An edge record could not be parsed.

    Attributes:
        line: The raw offending line
        line_number: 1-based position in the input, when known
    """

    line: str = ""
    line_number: Optional[int] = None


@dataclass
class NoRouteFoundError(CityRouteError):
    """No path exists between the requested cities.

    Attributes:
        departure: Departure city
        arrival: Arrival city
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(CityRouteError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
