"""Shared fixtures for graph tests."""

import pytest

from densegraph import Graph


@pytest.fixture
def graph_without_edges() -> Graph[int]:
    graph: Graph[int] = Graph()
    graph.add_node(5)
    graph.add_node(1)
    graph.add_node(12)
    graph.add_node(100)
    return graph


@pytest.fixture
def graph_with_edges(graph_without_edges: Graph[int]) -> Graph[int]:
    graph_without_edges.add_edge(1, 2)
    graph_without_edges.add_edge(2, 1)
    graph_without_edges.add_edge(0, 3)
    return graph_without_edges


@pytest.fixture
def letter_graph() -> Graph[str]:
    """Four nodes A-D with edges 0->1, 0->3, 3->0, 3->2."""
    graph = Graph(["A", "B", "C", "D"])
    graph.add_edge(0, 1)
    graph.add_edge(0, 3)
    graph.add_edge(3, 0)
    graph.add_edge(3, 2)
    return graph
