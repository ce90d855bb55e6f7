"""
densegraph - Dense Directed Graph Container

A small directed graph container that stores node payloads and outgoing
edge lists in two index-aligned lists. Nodes are referred to by the integer
index returned when they are added.

Main Classes:
    Graph: Node/edge container
    EdgeListView: Read-only view over one node's outgoing edges
    InvalidNodeIndex: Raised for node indices outside [0, node_count)

Example:
    >>> from densegraph import Graph
    >>> graph = Graph()
    >>> a = graph.add_node("A")
    >>> b = graph.add_node("B")
    >>> graph.add_edge(a, b)
    >>> list(graph.neighbors(a))
    [1]
"""

__version__ = "0.1.0"

from densegraph.core.graph import Graph
from densegraph.core.errors import GraphError, InvalidNodeIndex
from densegraph.classes.edgelist import EdgeListView
from densegraph.classes.utils import adjacency_matrix, degree_arrays

__all__ = [
    'Graph',
    'GraphError',
    'InvalidNodeIndex',
    'EdgeListView',
    'adjacency_matrix',
    'degree_arrays',
]
