"""
Supporting classes and helpers for graph containers.
"""

from .edgelist import EdgeListView
from .utils import adjacency_matrix, degree_arrays

__all__ = [
    'EdgeListView',
    'adjacency_matrix',
    'degree_arrays',
]
