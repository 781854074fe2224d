"""WeightedGraph container, edge-list loading and rendering."""

from fractions import Fraction

import networkx as nx
import pytest

from spt_checker.graph import (
    WeightedGraph, GraphError, VertexIndexError, EdgeNotFoundError,
    parse_graph, load_graph,
)


def test_empty_graph() -> None:
    g = WeightedGraph(3)
    assert g.vertex_count() == 3
    assert len(g) == 3
    assert g.edge_count() == 0
    assert list(g.edges()) == []
    assert WeightedGraph(0).vertex_count() == 0


def test_negative_vertex_count_rejected() -> None:
    with pytest.raises(ValueError):
        WeightedGraph(-1)


def test_add_edge_then_query() -> None:
    g = WeightedGraph(3)
    g.add_edge(0, 2, 7.5)
    assert g.is_edge(0, 2)
    assert g.edge_weight(0, 2) == 7.5
    assert not g.is_edge(2, 0)
    assert (0, 2) in g


def test_add_edge_overwrites_existing_weight() -> None:
    g = WeightedGraph(2)
    g.add_edge(0, 1, 3)
    g.add_edge(0, 1, 9)
    assert g.edge_weight(0, 1) == 9
    assert g.edge_count() == 1


@pytest.mark.parametrize("i, j", [(-1, 0), (0, 3), (3, 0), (0, -2)])
def test_add_edge_out_of_range_raises(i, j) -> None:
    g = WeightedGraph(3)
    with pytest.raises(VertexIndexError):
        g.add_edge(i, j, 1)
    assert g.edge_count() == 0


def test_remove_edge() -> None:
    g = WeightedGraph(3)
    g.add_edge(1, 2, 4)
    g.remove_edge(1, 2)
    assert not g.is_edge(1, 2)
    # Absent edges and bad indices are ignored
    g.remove_edge(1, 2)
    g.remove_edge(-1, 7)


def test_is_edge_out_of_range_is_false() -> None:
    g = WeightedGraph(2)
    assert not g.is_edge(5, 0)
    assert not g.is_edge(0, -1)


def test_edge_weight_missing_raises_not_found() -> None:
    g = WeightedGraph(2)
    g.add_edge(0, 1, 0)
    assert g.edge_weight(0, 1) == 0
    with pytest.raises(EdgeNotFoundError):
        g.edge_weight(1, 0)
    with pytest.raises(EdgeNotFoundError):
        g.edge_weight(9, 0)
    # Both error kinds share a base and keep their builtin meaning
    assert issubclass(EdgeNotFoundError, KeyError)
    assert issubclass(VertexIndexError, IndexError)
    assert issubclass(EdgeNotFoundError, GraphError) and issubclass(VertexIndexError, GraphError)


def test_neighbours_is_restartable_and_read_only(G) -> None:
    nbrs = G.neighbours(1)
    assert dict(nbrs) == {2: 2, 3: 5}
    assert sorted(nbrs) == sorted(nbrs)
    assert G.out_degree(1) == 2
    assert list(G.neighbours(3)) == []
    with pytest.raises(VertexIndexError):
        G.neighbours(4)


def test_weights_converted_to_weight_type() -> None:
    g = WeightedGraph(2, weight_type=Fraction)
    g.add_edge(0, 1, "1/3")
    assert g.edge_weight(0, 1) == Fraction(1, 3)


def test_str_rendering(G) -> None:
    lines = str(G).splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("0:")
    assert "(0, 1)[1.0]" in lines[0] and "(0, 2)[4.0]" in lines[0]
    assert lines[3] == "3:"


def test_equality() -> None:
    a = WeightedGraph.from_edges(3, [(0, 1, 1), (1, 2, 2)])
    b = WeightedGraph.from_edges(3, [(1, 2, 2), (0, 1, 1)])
    assert a == b
    b.add_edge(0, 2, 1)
    assert a != b


# ---------------------------------------------------------------------------
# Edge-list parsing
# ---------------------------------------------------------------------------

def test_parse_graph() -> None:
    g = parse_graph("3\n0 1 2.5\n1 2 1\n")
    assert g.vertex_count() == 3
    assert g.edge_weight(0, 1) == 2.5
    assert g.edge_weight(1, 2) == 1.0


def test_parse_graph_keeps_prefix_on_bad_token() -> None:
    g = parse_graph("3 0 1 1  1 2 oops  2 0 1")
    assert g.vertex_count() == 3
    assert g.is_edge(0, 1)
    assert not g.is_edge(1, 2)
    assert not g.is_edge(2, 0)


def test_parse_graph_truncated_triple() -> None:
    g = parse_graph("2 0 1 4 1")
    assert g.edge_count() == 1
    assert g.edge_weight(0, 1) == 4


def test_parse_graph_bad_vertex_count() -> None:
    assert parse_graph("").vertex_count() == 0
    assert parse_graph("abc 0 1 1").vertex_count() == 0


def test_parse_graph_out_of_range_edge_raises() -> None:
    with pytest.raises(VertexIndexError):
        parse_graph("2 0 5 1")


def test_parse_graph_int_weights_truncate() -> None:
    g = parse_graph("2 0 1 3.7", weight_type=int)
    assert g.edge_weight(0, 1) == 3
    assert isinstance(g.edge_weight(0, 1), int)


def test_load_graph_from_file(data_dir) -> None:
    g = load_graph(f"{data_dir}/graph1.txt")
    assert g is not None
    assert g.vertex_count() == 4
    assert g.edge_count() == 5


def test_load_graph_missing_file_returns_none(tmp_path) -> None:
    assert load_graph(str(tmp_path / "nope.txt")) is None


# ---------------------------------------------------------------------------
# networkx interop
# ---------------------------------------------------------------------------

def test_networkx_round_trip(G) -> None:
    D = G.to_networkx()
    assert isinstance(D, nx.DiGraph)
    assert D.number_of_nodes() == 4
    assert D[2][3]["weight"] == 1
    assert WeightedGraph.from_networkx(D) == G


def test_from_networkx_requires_dense_labels() -> None:
    D = nx.DiGraph()
    D.add_edge(0, 5, weight=1)
    with pytest.raises(VertexIndexError):
        WeightedGraph.from_networkx(D)
