"""Topological ordering algorithms for directed graphs."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable

    from ._digraph import DiGraph


def topological_sort[T: Hashable](graph: DiGraph[T]) -> list[T] | None:
    """Sort a graph topologically (sources before their targets).

    Uses Kahn's algorithm. The working set is a FIFO queue seeded with the
    zero in-degree nodes in node insertion order, and each node's neighbors
    are released in edge insertion order, so the result is reproducible for
    a given construction order.

    Args:
        graph: The graph to sort. It is not modified.

    Returns:
        List of all nodes where every edge (u, v) has u before v, or None if
        the graph contains a cycle (a self-loop counts as one).

    Example:
        >>> from nxgraph import DiGraph
        >>> topological_sort(DiGraph.from_edges([("a", "b"), ("b", "c")]))
        ['a', 'b', 'c']

    """
    indegree = graph.in_degree_map()

    queue = deque(node for node, deg in indegree.items() if deg == 0)
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in graph.neighbors(node):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    if len(order) != len(indegree):
        return None

    return order


def topological_generations[T: Hashable](graph: DiGraph[T]) -> list[list[T]] | None:
    """Group the nodes of a graph into topological generations.

    The first generation holds the nodes with no incoming edges; each later
    generation holds the nodes whose predecessors all appear in earlier
    generations. Within a generation, nodes follow the same order as in
    :func:`topological_sort`.

    Args:
        graph: The graph to layer. It is not modified.

    Returns:
        List of generations, or None if the graph contains a cycle.

    """
    indegree = graph.in_degree_map()

    current = [node for node, deg in indegree.items() if deg == 0]
    generations: list[list[T]] = []
    placed = 0

    while current:
        generations.append(current)
        placed += len(current)
        following: list[T] = []
        for node in current:
            for successor in graph.neighbors(node):
                indegree[successor] -= 1
                if indegree[successor] == 0:
                    following.append(successor)
        current = following

    if placed != len(indegree):
        return None

    return generations
