"""Graph module providing the directed graph container and its algorithms.

This module contains:
- DiGraph[T]: A generic, mutable directed graph with set semantics
- topological_sort / topological_generations: Kahn's algorithm orderings
- shortest_path / shortest_path_length / has_path: Breadth-first search queries
"""

from ._algorithms import topological_generations, topological_sort
from ._digraph import DiGraph
from ._search import has_path, shortest_path, shortest_path_length

__all__ = [
    "DiGraph",
    "has_path",
    "shortest_path",
    "shortest_path_length",
    "topological_generations",
    "topological_sort",
]
