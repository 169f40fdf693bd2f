"""Directed graphs with topological ordering and shortest-path search."""

__all__ = [
    "DiGraph",
    "GraphFile",
    "GraphFileError",
    "has_path",
    "load_graph",
    "shortest_path",
    "shortest_path_length",
    "topological_generations",
    "topological_sort",
]

from ._graph import (
    DiGraph,
    has_path,
    shortest_path,
    shortest_path_length,
    topological_generations,
    topological_sort,
)
from ._io import GraphFile, GraphFileError, load_graph
