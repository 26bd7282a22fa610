"""
cityroute CLI - shortest routes between cities
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .benchmark import BenchmarkReport, run_benchmark
from .config import BenchmarkConfig, get_config
from .container import Container
from .domain.errors import CityRouteError
from .io.output_text import format_route
from .observability import configure_logging
from .services import RouteService

EXIT_NO_ROUTE = 1
EXIT_BAD_INPUT = 2


@click.group()
@click.option("--log-level", default=None, help="Override CITYROUTE_LOG_LEVEL")
def cli(log_level: Optional[str]) -> None:
    """Shortest routes between cities with Dijkstra's algorithm"""
    configure_logging(get_config().observability, level=log_level)


@cli.command()
@click.argument("start")
@click.argument("end")
@click.option(
    "--routes-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="CSV file of from,to,distance lines",
)
@click.option("--directed/--undirected", default=None, help="Edge direction mode")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Abort or skip on a non-integer distance",
)
@click.pass_context
def route(
    ctx: click.Context,
    start: str,
    end: str,
    routes_file: Optional[Path],
    directed: Optional[bool],
    strict: Optional[bool],
) -> None:
    """Print the shortest route from START to END"""
    config = get_config()
    overrides: dict[str, object] = {}
    if routes_file is not None:
        overrides["data_dir"] = routes_file.parent
        overrides["routes_file"] = routes_file.name
    if directed is not None:
        overrides["directed"] = directed
    if strict is not None:
        overrides["strict"] = strict
    if overrides:
        config = config.model_copy(
            update={"graph": config.graph.model_copy(update=overrides)}
        )

    service = Container.create_default(config).resolve(RouteService)
    try:
        result = service.find_route(start.strip(), end.strip())
    except CityRouteError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_BAD_INPUT)

    click.echo(format_route(result))
    if not result.is_reachable:
        ctx.exit(EXIT_NO_ROUTE)


@cli.command()
@click.option(
    "--directed/--undirected",
    default=None,
    help="Benchmark only one graph kind (both when omitted)",
)
@click.option("--cities", type=click.IntRange(min=2), default=None, help="Number of cities")
@click.option("--edges", type=click.IntRange(min=1), default=None, help="Random edges to draw")
@click.option("--queries", type=click.IntRange(min=1), default=None, help="Queries per graph")
@click.option("--seed", type=int, default=None, help="Random seed")
def benchmark(
    directed: Optional[bool],
    cities: Optional[int],
    edges: Optional[int],
    queries: Optional[int],
    seed: Optional[int],
) -> None:
    """Time random queries on a generated graph"""
    base = get_config().benchmark
    overrides = {
        "num_cities": cities,
        "num_edges": edges,
        "num_queries": queries,
        "seed": seed,
    }
    settings = BenchmarkConfig(
        **{
            **base.model_dump(),
            **{k: v for k, v in overrides.items() if v is not None},
        }
    )

    kinds = [False, True] if directed is None else [directed]
    console = Console()
    for index, kind in enumerate(kinds):
        if index:
            click.echo("--------------\n")
        _print_report(console, run_benchmark(kind, settings))


def _print_report(console: Console, report: BenchmarkReport) -> None:
    for number, query in enumerate(report.queries, start=1):
        if query.found and query.num_stops > 1:
            click.echo(
                f"Query {number}: {query.start} -> {query.end} | "
                f"Path Length: {query.num_stops} | Time: {query.elapsed_ms:.1f} ms"
            )
        else:
            click.echo(f"Query {number}: {query.start} -> {query.end} | No path found")

    kind = "Directed" if report.directed else "Undirected"
    table = Table(title=f"Summary ({kind})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Nodes", str(report.num_nodes))
    table.add_row("Edges", str(report.num_edges))
    table.add_row("Total Queries", str(report.total_queries))
    table.add_row("Successful Paths", str(report.successful_paths))
    table.add_row("Average Time per Query", f"{report.average_ms:.1f} ms")
    console.print(table)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
