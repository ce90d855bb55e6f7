"""Tests for the read-only edge list view."""

import pytest

from densegraph import EdgeListView, Graph


class TestEdgeListView:
    def test_sequence_protocol(self, letter_graph: Graph[str]) -> None:
        view = letter_graph.neighbors(3)
        assert len(view) == 2
        assert view[0] == 0
        assert view[-1] == 2
        assert view[:1] == [0]
        assert list(view) == [0, 2]
        assert 2 in view
        assert 1 not in view
        assert view.index(2) == 1
        assert view.count(0) == 1
        assert list(reversed(view)) == [2, 0]

    def test_equality(self, letter_graph: Graph[str]) -> None:
        view = letter_graph.neighbors(0)
        assert view == [1, 3]
        assert view == (1, 3)
        assert view == letter_graph.neighbors(0)
        assert view != [3, 1]
        assert view != letter_graph.neighbors(3)
        assert view != "13"

    def test_empty_view_is_falsy(self, letter_graph: Graph[str]) -> None:
        assert not letter_graph.neighbors(1)

    def test_reflects_later_edges(self, letter_graph: Graph[str]) -> None:
        view = letter_graph.neighbors(1)
        letter_graph.add_edge(1, 2)
        assert view == [2]

    def test_read_only(self, letter_graph: Graph[str]) -> None:
        view = letter_graph.neighbors(0)
        with pytest.raises(TypeError):
            view[0] = 2
        assert not hasattr(view, "append")

    def test_slice_is_a_copy(self, letter_graph: Graph[str]) -> None:
        chunk = letter_graph.neighbors(0)[:]
        chunk.append(0)
        assert list(letter_graph.neighbors(0)) == [1, 3]

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(EdgeListView([1]))

    def test_repr(self) -> None:
        assert repr(EdgeListView([1, 1])) == "EdgeListView([1, 1])"
