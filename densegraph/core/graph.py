"""
Core graph data structure.

Nodes and their outgoing edges live in two index-aligned lists. A node is
identified by its position, edges store target positions, and nothing is
ever removed, so an index handed out by ``add_node`` stays valid for the
lifetime of the graph.
"""

import logging
from numbers import Integral
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..classes.edgelist import EdgeListView
from .errors import InvalidNodeIndex

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Graph(Generic[T]):
    """
    Directed graph container with dense node storage.

    This class keeps:
    - ``_nodes``: node payloads in insertion order
    - ``_edges``: one list of target indices per node, aligned with ``_nodes``

    Self-loops and parallel edges are stored as given.
    """

    def __init__(self, payloads: Optional[Iterable[T]] = None):
        """
        Initialize the graph, optionally adding nodes.

        Args:
            payloads: Optional iterable of payloads, added in order as by add_node
        """
        self._nodes: List[T] = []
        self._edges: List[List[int]] = []

        if payloads is not None:
            for payload in payloads:
                self.add_node(payload)
            logger.debug(f"Built graph with {len(self._nodes)} nodes")

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise TypeError(f"node index must be an integer, not {type(index).__name__}")
        if index < 0 or index >= len(self._nodes):
            raise InvalidNodeIndex(index, len(self._nodes))

    def add_node(self, payload: T) -> int:
        """
        Add a node and return its index.

        Args:
            payload: Value stored for the node; kept as-is

        Returns:
            Index of the new node, equal to node_count() - 1
        """
        index = len(self._nodes)
        self._nodes.append(payload)
        self._edges.append([])
        return index

    def add_edge(self, source: int, target: int) -> None:
        """
        Add a directed edge from source to target.

        Both indices are validated before the graph is modified.

        Raises:
            InvalidNodeIndex: If either index is out of range
        """
        self._check_index(source)
        self._check_index(target)
        self._edges[source].append(int(target))

    def neighbors(self, index: int) -> EdgeListView:
        """
        Get the outgoing edges of a node.

        Returns:
            Live read-only view of target indices in insertion order

        Raises:
            InvalidNodeIndex: If index is out of range
        """
        self._check_index(index)
        return EdgeListView(self._edges[index])

    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return len(self._nodes)

    def node(self, index: int) -> T:
        """
        Get the payload stored at a node index.

        Raises:
            InvalidNodeIndex: If index is out of range
        """
        self._check_index(index)
        return self._nodes[index]

    def nodes(self) -> Iterator[T]:
        """Iterate over node payloads in index order."""
        return iter(self._nodes)

    def edge_count(self) -> int:
        """Get the total number of edges, counting parallel edges individually."""
        return sum(len(targets) for targets in self._edges)

    def edges_to(self, index: int) -> List[int]:
        """
        Get the source indices of all edges pointing into a node.

        A source appears once per edge, so parallel edges repeat it.

        Raises:
            InvalidNodeIndex: If index is out of range
        """
        self._check_index(index)
        return [
            source
            for source, targets in enumerate(self._edges)
            for target in targets
            if target == index
        ]

    def edges(self, index: int) -> List[int]:
        """
        Get outgoing targets followed by incoming sources of a node.

        Raises:
            InvalidNodeIndex: If index is out of range
        """
        self._check_index(index)
        return list(self._edges[index]) + self.edges_to(index)

    def out_degree(self, index: int) -> int:
        self._check_index(index)
        return len(self._edges[index])

    def in_degree(self, index: int) -> int:
        self._check_index(index)
        return sum(targets.count(index) for targets in self._edges)

    def copy(self) -> "Graph[T]":
        """
        Copy the graph.

        Payload objects are shared with the original; edge lists are not.
        """
        duplicate: Graph[T] = Graph()
        duplicate._nodes = list(self._nodes)
        duplicate._edges = [list(targets) for targets in self._edges]
        return duplicate

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for payload, targets in zip(self._nodes, self._edges):
            for target in targets:
                lines.append(f"{payload} -> {self._nodes[target]}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.edge_count()})"
