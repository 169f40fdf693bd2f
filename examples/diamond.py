"""Build the diamond graph in code and run every algorithm on it."""

from rich.console import Console

from nxgraph import (
    DiGraph,
    has_path,
    shortest_path,
    shortest_path_length,
    topological_generations,
    topological_sort,
)

console = Console()

g = DiGraph[int]()
g.add_edges_from([(1, 2), (2, 3), (3, 5), (1, 4), (4, 5)])
g.add_node(6)

console.print(f"graph={g!r}")
console.print(f"nodes={sorted(g.nodes())}")
console.print(f"edges={sorted(g.edges())}")
console.print(f"in degree map={g.in_degree_map()}")
console.print(f"topological sort={topological_sort(g)}")
console.print(f"topological generations={topological_generations(g)}")
console.print(f"shortest path from 1 to 5={shortest_path(g, 1, 5)}")
console.print(f"shortest path length from 1 to 5={shortest_path_length(g, 1, 5)}")
console.print(f"has path from 1 to 6={has_path(g, 1, 6)}")

cycle = DiGraph.from_edges([(1, 2), (2, 3), (3, 1)])
console.print(f"topological sort of a cycle={topological_sort(cycle)}")
