from __future__ import annotations

from pathlib import Path

import pytest

from wordnet_sca.digraph import Digraph
from wordnet_sca.errors import SCAError, VertexOutOfRangeError


def test_new_graph_has_no_edges() -> None:
    graph = Digraph(3)
    assert graph.num_vertices() == 3
    assert graph.num_edges() == 0
    assert [graph.neighbors(v) for v in range(3)] == [(), (), ()]
    assert str(graph) == "Digraph(V=3, E=0)"


def test_empty_graph_is_allowed() -> None:
    graph = Digraph(0)
    assert graph.num_vertices() == 0
    with pytest.raises(VertexOutOfRangeError):
        graph.neighbors(0)


def test_negative_vertex_count_rejected() -> None:
    with pytest.raises(ValueError):
        Digraph(-1)


@pytest.mark.parametrize("count", [2.5, "3", None, True])
def test_non_integral_vertex_count_rejected(count) -> None:
    with pytest.raises(TypeError):
        Digraph(count)


def test_neighbors_cannot_change_the_graph() -> None:
    graph = Digraph.from_edges(3, [(0, 1)])
    with pytest.raises(AttributeError):
        graph.neighbors(0).append(2)
    assert graph.neighbors(0) == (1,)
    assert graph.num_edges() == 1


def test_neighbors_keep_insertion_order_and_duplicates() -> None:
    graph = Digraph(4)
    graph.add_edge(0, 3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 3)
    assert graph.neighbors(0) == (3, 1, 3)
    assert graph.num_edges() == 3
    assert graph.edges() == [(0, 3), (0, 1), (0, 3)]


@pytest.mark.parametrize("source, target", [(-1, 0), (0, 2), (2, 0), (True, 0), ("0", 1)])
def test_add_edge_rejects_bad_vertices(source, target) -> None:
    graph = Digraph(2)
    with pytest.raises(VertexOutOfRangeError) as excinfo:
        graph.add_edge(source, target)
    assert isinstance(excinfo.value, IndexError)
    assert isinstance(excinfo.value, SCAError)
    assert graph.num_edges() == 0


def test_from_file(tmp_path: Path) -> None:
    path = tmp_path / "digraph.txt"
    path.write_text("5\n4\n1 0\n2 0\n3 1\n4 2\n")

    graph = Digraph.from_file(str(path))

    assert graph.num_vertices() == 5
    assert graph.num_edges() == 4
    assert graph.neighbors(3) == (1,)
    assert graph.neighbors(0) == ()


def test_from_file_accepts_edges_on_one_line(tmp_path: Path) -> None:
    path = tmp_path / "digraph.txt"
    path.write_text("3 2   1 0  2 0")
    graph = Digraph.from_file(str(path))
    assert graph.edges() == [(1, 0), (2, 0)]


def test_from_file_truncated(tmp_path: Path) -> None:
    path = tmp_path / "digraph.txt"
    path.write_text("3\n2\n1 0\n")
    with pytest.raises(ValueError):
        Digraph.from_file(str(path))
