"""Services layer - Application orchestration.

Available services:
- RouteService: Loads the city graph and answers route queries
"""

from .route_service import RouteService

__all__ = ["RouteService"]
