"""
Undirected adjacency graph over site indices.
"""

from typing import Iterator, List, Sequence, Tuple


class UndirectedGraph:
    """
    Symmetric adjacency relation with a fixed neighbor order per node.

    Neighbors are kept in insertion order. That order is what the growth
    rules use to break ties, so it is exposed as a tuple and never as a set.
    """

    def __init__(self, num_nodes: int):
        """
        Initialize an edgeless graph.

        Parameters
        ----------
        num_nodes : int
            Number of nodes; valid node indices are ``0..num_nodes-1``
        """
        if num_nodes < 0:
            raise ValueError(f"num_nodes must be non-negative, got {num_nodes}")
        self._adjacency: List[List[int]] = [[] for _ in range(num_nodes)]
        self._num_edges = 0

    @classmethod
    def from_edges(cls, num_nodes: int, edges: Sequence[Tuple[int, int]]) -> "UndirectedGraph":
        """Create a graph by adding ``edges`` in order."""
        graph = cls(num_nodes)
        for a, b in edges:
            graph.add_edge(a, b)
        return graph

    @property
    def num_nodes(self) -> int:
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"Node {node} out of range for graph with {len(self._adjacency)} nodes")

    def add_edge(self, a: int, b: int) -> None:
        """Add the undirected edge {a, b}; each pair may be added only once."""
        self._check_node(a)
        self._check_node(b)
        if a == b:
            raise ValueError(f"Self-loop on node {a} is not allowed")
        if b in self._adjacency[a]:
            raise ValueError(f"Edge ({a}, {b}) already exists")
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)
        self._num_edges += 1

    def has_edge(self, a: int, b: int) -> bool:
        self._check_node(a)
        self._check_node(b)
        return b in self._adjacency[a]

    def neighbors(self, node: int) -> Tuple[int, ...]:
        """Neighbors of ``node`` in insertion order."""
        self._check_node(node)
        return tuple(self._adjacency[node])

    def degree(self, node: int) -> int:
        self._check_node(node)
        return len(self._adjacency[node])

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield each undirected edge once as (low, high)."""
        for a, neighbors in enumerate(self._adjacency):
            for b in neighbors:
                if a < b:
                    yield (a, b)

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return f"UndirectedGraph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"
