"""
Core graph data structures.

This module contains the index-aligned node/edge storage and its errors.
"""

from .errors import GraphError, InvalidNodeIndex
from .graph import Graph

__all__ = [
    'Graph',
    'GraphError',
    'InvalidNodeIndex',
]
