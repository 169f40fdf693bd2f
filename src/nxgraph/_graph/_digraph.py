"""Generic directed graph container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator


@dataclass(slots=True, repr=False, eq=False)
class DiGraph[T: Hashable]:
    """A directed graph with set-like node and edge semantics.

    The graph is generic over the node type T (e.g., int, str). Any hashable
    value is a legal node. Nodes and edges are only ever added, never removed.

    Adjacency is stored as dicts with ``None`` values so that every ordered
    query (iteration, ``neighbors``, ``predecessors``) follows insertion order.
    The algorithms in this package rely on that order for their tie-breaks.

    Attributes:
        _successors: Mapping from node to the nodes it has an edge to.
        _predecessors: Mapping from node to the nodes that have an edge to it.

    Example:
        >>> g = DiGraph[int]()
        >>> g.add_edges_from([(1, 2), (2, 3)])
        >>> g.neighbors(1)
        (2,)
        >>> sorted(g.nodes())
        [1, 2, 3]

    """

    _successors: dict[T, dict[T, None]] = field(default_factory=dict)
    _predecessors: dict[T, dict[T, None]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> DiGraph[T]:
        """Build a graph from an iterable of (source, target) edges.

        Args:
            edges: Iterable of (source, target) tuples. An edge (a, b) means a -> b.

        Returns:
            A new DiGraph instance.

        """
        graph = cls()
        graph.add_edges_from(edges)
        return graph

    def add_node(self, node: T) -> None:
        """Add a node. Do nothing if it already exists."""
        self._successors.setdefault(node, {})
        self._predecessors.setdefault(node, {})

    def add_edge(self, u: T, v: T) -> None:
        """Add a directed edge u -> v, registering both endpoints as nodes.

        Adding an edge that already exists is a no-op. Self-loops are allowed.
        """
        self.add_node(u)
        self.add_node(v)
        self._successors[u][v] = None
        self._predecessors[v][u] = None

    def add_edges_from(self, edges: Iterable[tuple[T, T]]) -> None:
        """Add many edges at once, in the given order."""
        for u, v in edges:
            self.add_edge(u, v)

    def nodes(self) -> frozenset[T]:
        """All nodes in the graph."""
        return frozenset(self._successors)

    def edges(self) -> frozenset[tuple[T, T]]:
        """All directed edges as (source, target) pairs."""
        return frozenset((u, v) for u, targets in self._successors.items() for v in targets)

    def neighbors(self, node: T) -> tuple[T, ...]:
        """Get the outgoing neighbors of a node, in edge insertion order.

        Args:
            node: The node to query.

        Returns:
            Nodes that ``node`` has an edge to. Empty if ``node`` has no
            outgoing edges or is not in the graph.

        """
        return tuple(self._successors.get(node, ()))

    def predecessors(self, node: T) -> tuple[T, ...]:
        """Get the nodes with an edge into a node, in edge insertion order.

        Args:
            node: The node to query.

        Returns:
            Nodes that have an edge to ``node``. Empty if there are none or
            ``node`` is not in the graph.

        """
        return tuple(self._predecessors.get(node, ()))

    def contains_node(self, node: T) -> bool:
        return node in self._successors

    def contains_edge(self, u: T, v: T) -> bool:
        return v in self._successors.get(u, ())

    def in_degree(self, node: T) -> int:
        """Number of edges pointing to a node (0 for unknown nodes)."""
        return len(self._predecessors.get(node, ()))

    def in_degree_map(self) -> dict[T, int]:
        """In-degree of every node, keyed in node insertion order."""
        return {node: len(preds) for node, preds in self._predecessors.items()}

    def __iter__(self) -> Iterator[T]:
        """Iterate over nodes in insertion order."""
        return iter(self._successors)

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._successors)

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._successors

    def __repr__(self) -> str:
        num_edges = sum(len(targets) for targets in self._successors.values())
        return f"{type(self).__name__}(nodes={len(self)}, edges={num_edges})"
