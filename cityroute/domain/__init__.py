"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityRouteError,
    ConfigurationError,
    GraphError,
    MalformedRecordError,
    NegativeWeightError,
    NoRouteFoundError,
)
from .models import Edge, EdgeRecord, PathResult

__all__ = [
    # Models
    "Edge",
    "EdgeRecord",
    "PathResult",
    # Errors
    "CityRouteError",
    "GraphError",
    "NegativeWeightError",
    "MalformedRecordError",
    "NoRouteFoundError",
    "ConfigurationError",
]
