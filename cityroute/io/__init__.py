"""Input/output helpers for the city route planner.

Edge ingestion lives in :mod:`cityroute.graph.load_graph`; this
subpackage holds the presentation side.
"""

from .output_text import format_distance, format_path, format_route

__all__ = ["format_path", "format_distance", "format_route"]
