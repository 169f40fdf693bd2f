import logging
import re
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from nxgraph._graph import DiGraph, shortest_path, topological_generations, topological_sort
from nxgraph._io import GraphFileError, NodeValue, load_graph

from .config import ConfigError, get_config
from .graph_render import format_node, format_path, render_degree_table, render_generations

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

_INT_PATTERN = re.compile(r"-?[0-9]+")

GraphOption = Annotated[
    Path | None,
    typer.Option(
        "-g",
        "--graph",
        help="Path to edge-list TOML file (defaults to tool.nxgraph.graph in pyproject.toml)",
    ),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the result as JSON on stdout"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """nxgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)


def _resolve_graph_path(graph: Path | None) -> Path:
    if graph is not None:
        return graph

    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if config.graph is None:
        err_console.print(
            "[red]Error: No graph file given. Pass --graph or set \\[tool.nxgraph].graph in pyproject.toml[/red]",
        )
        raise typer.Exit(code=1)

    logger.debug(f"Using graph file from config: {config.graph}")
    return config.graph


def _load(graph: Path | None) -> DiGraph[NodeValue]:
    graph_path = _resolve_graph_path(graph)
    try:
        return load_graph(graph_path)
    except GraphFileError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _resolve_node(graph: DiGraph[NodeValue], raw: str) -> NodeValue:
    """Interpret a command-line node name as an int node when the graph has one, else as a string.

    Only plain decimal literals such as "10" or "-3" are tried as ints, so "1_0" or "+1" stay strings.
    """
    if _INT_PATTERN.fullmatch(raw) is None:
        return raw
    as_int = int(raw)
    if as_int in graph:
        return as_int
    return raw


@app.command()
def info(
    *,
    graph: GraphOption = None,
) -> None:
    """Show the nodes and edges of a graph."""
    g = _load(graph)
    render_degree_table(g, out_console)


@app.command()
def toposort(
    *,
    graph: GraphOption = None,
    generations: Annotated[
        bool,
        typer.Option("--generations", help="Group nodes into topological generations"),
    ] = False,
    as_json: JsonOption = False,
) -> None:
    """Print a topological ordering of a graph (exit non-zero if it has a cycle)."""
    g = _load(graph)

    result = topological_generations(g) if generations else topological_sort(g)
    if result is None:
        err_console.print("[red]✗ Graph contains a cycle; no topological order exists[/red]")
        raise typer.Exit(code=1)

    if as_json:
        out_console.print_json(data=result)
        return

    if generations:
        render_generations(result, out_console)
    else:
        out_console.print(format_path(result))


@app.command()
def path(
    source: Annotated[str, typer.Argument(help="Start node")],
    target: Annotated[str, typer.Argument(help="End node")],
    *,
    graph: GraphOption = None,
    as_json: JsonOption = False,
) -> None:
    """Print a shortest path between two nodes (exit non-zero if there is none)."""
    g = _load(graph)
    source_node = _resolve_node(g, source)
    target_node = _resolve_node(g, target)

    result = shortest_path(g, source_node, target_node)
    if result is None:
        err_console.print(
            f"[red]✗ No path from {format_node(source_node)} to {format_node(target_node)}[/red]",
        )
        raise typer.Exit(code=1)

    if as_json:
        out_console.print_json(data=result)
        return

    out_console.print(
        Panel(
            format_path(result),
            title="[bold]Shortest path[/bold]",
            subtitle=f"[dim]{len(result) - 1} edges[/dim]",
            border_style="cyan",
        ),
    )


def main() -> None:
    app()
