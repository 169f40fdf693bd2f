"""Unweighted path searching in directed graphs."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable

    from ._digraph import DiGraph


def _bfs_predecessors[T: Hashable](graph: DiGraph[T], source: T, target: T) -> dict[T, T] | None:
    """Run a breadth-first search from source until target is dequeued.

    Returns:
        Mapping from each discovered node to its predecessor on the first path
        that reached it, or None if target is unreachable or either endpoint
        is missing from the graph.

    """
    if source not in graph or target not in graph:
        return None

    previous: dict[T, T] = {}
    visited = {source}
    queue = deque([source])

    while queue:
        node = queue.popleft()
        if node == target:
            return previous
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                previous[neighbor] = node
                queue.append(neighbor)

    return None


def _build_path[T: Hashable](previous: dict[T, T], source: T, target: T) -> list[T]:
    path = [target]
    current = target
    while current != source:
        current = previous[current]
        path.append(current)
    path.reverse()
    return path


def shortest_path[T: Hashable](graph: DiGraph[T], source: T, target: T) -> list[T] | None:
    """Find a shortest directed path (by edge count) from source to target.

    Among equally short paths, the one found first when neighbors are expanded
    in edge insertion order wins.

    Args:
        graph: The graph to search. It is not modified.
        source: Start node.
        target: End node.

    Returns:
        The nodes of the path, source and target inclusive, or None if there
        is no path. ``[source]`` when source equals target.

    Example:
        >>> from nxgraph import DiGraph
        >>> g = DiGraph.from_edges([(1, 2), (2, 3), (1, 3)])
        >>> shortest_path(g, 1, 3)
        [1, 3]

    """
    previous = _bfs_predecessors(graph, source, target)
    if previous is None:
        return None
    return _build_path(previous, source, target)


def shortest_path_length[T: Hashable](graph: DiGraph[T], source: T, target: T) -> int | None:
    """Number of edges on a shortest path from source to target, or None if there is no path."""
    path = shortest_path(graph, source, target)
    if path is None:
        return None
    return len(path) - 1


def has_path[T: Hashable](graph: DiGraph[T], source: T, target: T) -> bool:
    """Return True if graph has a directed path from source to target."""
    return _bfs_predecessors(graph, source, target) is not None
