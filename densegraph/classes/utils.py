"""
numpy helpers for graph containers.

These functions turn the stored adjacency lists into dense arrays for
callers that want to hand the graph to numerical code.
"""

import logging
from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger(__name__)


def adjacency_matrix(graph: "Graph", dtype=np.int64) -> np.ndarray:
    """
    Build a dense adjacency matrix from a graph.

    Args:
        graph: Graph to convert
        dtype: numpy dtype of the result

    Returns:
        Square array where entry ``[i, j]`` counts the edges from node i to node j
    """
    n = graph.node_count()
    matrix = np.zeros((n, n), dtype=dtype)
    for source in range(n):
        targets = graph.neighbors(source)
        if targets:
            np.add.at(matrix[source], np.asarray(list(targets), dtype=np.intp), 1)

    logger.debug(f"Built {n}x{n} adjacency matrix with {graph.edge_count()} edges")
    return matrix


def degree_arrays(graph: "Graph") -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute in-degree and out-degree for every node.

    Parallel edges count individually and a self-loop adds one to both
    degrees of its node.

    Returns:
        Tuple of (in_degree, out_degree) integer arrays indexed by node
    """
    n = graph.node_count()
    out_degree = np.array([len(graph.neighbors(i)) for i in range(n)], dtype=np.int64)
    targets = [target for i in range(n) for target in graph.neighbors(i)]
    in_degree = np.bincount(np.asarray(list(targets), dtype=np.intp), minlength=n).astype(np.int64)
    return in_degree, out_degree
