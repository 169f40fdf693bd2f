"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from nxgraph._graph import DiGraph


def format_node(node: Hashable) -> str:
    """Format a node for display, escaping Rich markup."""
    return escape(str(node))


def format_path(path: Sequence[Hashable]) -> str:
    return " -> ".join(format_node(node) for node in path)


def render_degree_table(graph: DiGraph, console: Console) -> None:
    """Render per-node degree information as a Rich table.

    Args:
        graph: The graph to describe.
        console: Rich Console to output to.

    """
    if not len(graph):
        console.print("[dim]Graph is empty[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    table.add_column("Successors", style="dim")

    for node, indegree in graph.in_degree_map().items():
        successors = graph.neighbors(node)
        table.add_row(
            format_node(node),
            str(indegree),
            str(len(successors)),
            ", ".join(format_node(s) for s in successors),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(graph)} nodes, {len(graph.edges())} edges[/dim]")


def render_generations(generations: list[list[Hashable]], console: Console) -> None:
    """Render topological generations as a Rich table, one row per generation.

    Args:
        generations: Output of topological_generations.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Generation", justify="right", style="bold")
    table.add_column("Nodes")

    for index, generation in enumerate(generations):
        table.add_row(str(index), ", ".join(format_node(node) for node in generation))

    console.print(table)
