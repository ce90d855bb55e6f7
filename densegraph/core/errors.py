"""
Exceptions raised by the graph container.
"""


class GraphError(Exception):
    """Base class for all graph errors."""


class InvalidNodeIndex(GraphError, IndexError):
    """
    Raised when a node index falls outside ``[0, node_count)``.

    Attributes:
        index: The offending index
        node_count: Number of nodes in the graph at the time of the call
    """

    def __init__(self, index: int, node_count: int):
        self.index = index
        self.node_count = node_count
        super().__init__(
            f"node index out of range: node count is {node_count} but index is {index}"
        )
