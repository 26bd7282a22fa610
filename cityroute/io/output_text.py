"""Text rendering of shortest-path results.

These helpers turn a PathResult into the lines shown by the CLI. They
are kept separate from the engine so the algorithm never prints.
"""

from ..domain.models import PathResult

ARROW = " -> "
UNREACHABLE = "unreachable"


def format_path(result: PathResult, separator: str = ARROW) -> str:
    """Join the cities of ``result`` with ``separator``.

    Returns an empty string when no route was found.
    """
    if not result.is_reachable:
        return ""
    return separator.join(result.path)


def format_distance(result: PathResult) -> str:
    if result.distance is None:
        return UNREACHABLE
    return str(result.distance)


def format_route(result: PathResult) -> str:
    """Render a result as a two-line route summary.

    Example
    -------
    >>> print(format_route(PathResult(path=("A", "B", "C"), distance=3)))
    Shortest route: A -> B -> C
    Shortest distance: 3
    """
    if not result.is_reachable:
        route_line = "No path found"
    else:
        route_line = f"Shortest route: {format_path(result)}"
    return f"{route_line}\nShortest distance: {format_distance(result)}"
