"""
Read-only view over a single node's outgoing edge list.
"""

from collections.abc import Sequence
from typing import Iterator, List, Union, overload


class EdgeListView(Sequence):
    """
    Live, read-only sequence of target node indices.

    The view wraps the graph's own list, so edges appended later through
    ``Graph.add_edge`` show up here. Slicing returns a plain list copy.
    """

    __slots__ = ('_targets',)

    def __init__(self, targets: List[int]):
        self._targets = targets

    @overload
    def __getitem__(self, position: int) -> int: ...

    @overload
    def __getitem__(self, position: slice) -> List[int]: ...

    def __getitem__(self, position: Union[int, slice]) -> Union[int, List[int]]:
        return self._targets[position]

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._targets)

    def __contains__(self, target: object) -> bool:
        return target in self._targets

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EdgeListView):
            return self._targets == other._targets
        if isinstance(other, (list, tuple)):
            return self._targets == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"EdgeListView({self._targets!r})"
