"""Tests for IndexedGraph: node/edge storage and adjacency."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from indexgraph import IndexedGraph, UnknownEdge, UnknownNode

# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


def test_insert_node_is_idempotent(graph: IndexedGraph) -> None:
    first = graph.insert_node("A")
    second = graph.insert_node("A")

    assert first == second
    assert graph.node_count() == 1
    assert len(graph.aNode) == 1


def test_insert_node_assigns_sequential_indices(graph: IndexedGraph) -> None:
    assert [graph.insert_node(name) for name in ("A", "B", "C")] == [0, 1, 2]


def test_get_node_returns_none_when_absent(graph: IndexedGraph) -> None:
    graph.insert_node("A")
    assert graph.get_node("A") == 0
    assert graph.get_node("missing") is None


def test_ids_can_be_any_hashable(graph: IndexedGraph) -> None:
    a = graph.insert_node(("tenant", 7))
    b = graph.insert_node(42)

    assert graph.get_node(("tenant", 7)) == a
    assert graph.get_node(42) == b
    assert graph.get_node_id(a) == ("tenant", 7)


def test_node_value_kept_unless_replaced(graph: IndexedGraph) -> None:
    index = graph.insert_node("A", value="first")
    graph.insert_node("A")
    assert graph.get_node_record(index).value == "first"

    graph.insert_node("A", value="second")
    assert graph.get_node_record(index).value == "second"


def test_remove_node_tombstones_index(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    graph.insert_node("B")

    graph.remove_node(a)

    assert graph.get_node("A") is None
    assert "A" not in graph
    assert graph.aNode[a] is None
    assert len(graph) == 1
    with pytest.raises(UnknownNode):
        graph.get_node_record(a)


def test_removed_index_is_never_reused(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    graph.remove_node(a)

    again = graph.insert_node("A")
    other = graph.insert_node("B")

    assert again != a
    assert other not in (a, again)


def test_remove_node_twice_fails(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    graph.remove_node(a)

    with pytest.raises(UnknownNode) as excinfo:
        graph.remove_node(a)
    assert excinfo.value.ref == a


@pytest.mark.parametrize("bad", [-1, 5, None, "A", True, 1.0])
def test_unknown_node_references(graph: IndexedGraph, bad) -> None:
    graph.insert_node("A")
    graph.insert_node("B")

    with pytest.raises(UnknownNode):
        graph.neighbors(bad)


def test_unknown_node_is_a_key_error(graph: IndexedGraph) -> None:
    with pytest.raises(KeyError):
        graph.remove_node(0)


# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------


def test_insert_edge_requires_live_endpoints(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")

    with pytest.raises(UnknownNode):
        graph.insert_edge(a, 3)
    with pytest.raises(UnknownNode):
        graph.insert_edge(3, a)

    # Nothing half-inserted
    assert graph.edge_count() == 0
    assert graph.aEdge == []
    assert graph.neighbors(a) == []


def test_parallel_edges_get_distinct_indices(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    b = graph.insert_node("B")

    e1 = graph.insert_edge(a, b, 1)
    e2 = graph.insert_edge(a, b, 2)

    assert e1 != e2
    assert graph.neighbors(a) == [(e1, b, 1), (e2, b, 2)]


def test_neighbors_in_insertion_order(graph: IndexedGraph) -> None:
    a, b, c, d = (graph.insert_node(name) for name in "ABCD")
    e_ad = graph.insert_edge(a, d)
    e_ab = graph.insert_edge(a, b, 0.5)
    e_ac = graph.insert_edge(a, c)

    assert graph.neighbors(a) == [(e_ad, d, None), (e_ab, b, 0.5), (e_ac, c, None)]
    assert graph.neighbors(b) == []


def test_remove_edge(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    b = graph.insert_node("B")
    e1 = graph.insert_edge(a, b)
    e2 = graph.insert_edge(a, b)

    graph.remove_edge(e1)

    assert graph.neighbors(a) == [(e2, b, None)]
    assert graph.predecessors(b) == [(e2, a, None)]
    assert not graph.contains_edge(e1)
    assert graph.contains_edge(e2)
    with pytest.raises(UnknownEdge):
        graph.remove_edge(e1)
    with pytest.raises(UnknownEdge):
        graph.get_edge(e1)


@pytest.mark.parametrize("bad", [-1, 10, None, "0"])
def test_unknown_edge_references(graph: IndexedGraph, bad) -> None:
    a = graph.insert_node("A")
    graph.insert_edge(a, a)

    with pytest.raises(UnknownEdge):
        graph.remove_edge(bad)


def test_remove_node_cascades_to_touching_edges(graph: IndexedGraph) -> None:
    a, b, c = (graph.insert_node(name) for name in "ABC")
    e_ab = graph.insert_edge(a, b)
    e_bc = graph.insert_edge(b, c)
    e_ca = graph.insert_edge(c, a)
    e_bb = graph.insert_edge(b, b)
    e_ac = graph.insert_edge(a, c)

    graph.remove_node(b)

    for edge_index in (e_ab, e_bc, e_bb):
        assert not graph.contains_edge(edge_index)
    assert graph.neighbors(a) == [(e_ac, c, None)]
    assert graph.neighbors(c) == [(e_ca, a, None)]
    assert graph.edge_count() == 2
    assert all(graph.aEdge[e] is not None for e in (e_ca, e_ac))


def test_adjacency_consistent_with_edge_table(graph: IndexedGraph) -> None:
    nodes = [graph.insert_node(i) for i in range(4)]
    for src in nodes:
        for dst in nodes:
            graph.insert_edge(src, dst)
    graph.remove_node(nodes[2])
    graph.remove_edge(0)

    for pEdge in graph.edges():
        listed = [e for e, _, _ in graph.neighbors(pEdge.from_index)]
        assert listed.count(pEdge.index) == 1

    live = {pEdge.index for pEdge in graph.edges()}
    for pNode in graph.nodes():
        assert {e for e, _, _ in graph.neighbors(pNode.index)} <= live


@pytest.mark.parametrize("weight", [0, 3, -1.5, 2.25])
def test_numeric_weights_accepted(graph: IndexedGraph, weight) -> None:
    a = graph.insert_node("A")
    edge_index = graph.insert_edge(a, a, weight)
    assert graph.get_edge(edge_index).weight == weight


@pytest.mark.parametrize("weight", ["1", True, [1]])
def test_non_numeric_weight_rejected(graph: IndexedGraph, weight) -> None:
    a = graph.insert_node("A")
    with pytest.raises(TypeError):
        graph.insert_edge(a, a, weight)
    assert graph.edge_count() == 0


def test_nan_weight_rejected(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    with pytest.raises(ValueError):
        graph.insert_edge(a, a, math.nan)


# ---------------------------------------------------------------------------
# Whole-store queries
# ---------------------------------------------------------------------------


def test_degrees_sources_and_sinks(diamond) -> None:
    g, ids = diamond

    assert g.out_degree(ids["A"]) == 2
    assert g.in_degree(ids["A"]) == 0
    assert g.in_degree(ids["D"]) == 2
    assert g.in_degree(ids["C"]) == 2
    assert g.get_sources() == [ids["A"]]
    assert g.get_sinks() == [ids["D"]]


def test_first_and_last_node(graph: IndexedGraph) -> None:
    assert graph.first_node() is None
    assert graph.last_node() is None

    a, b, c = (graph.insert_node(name) for name in "ABC")
    graph.remove_node(c)

    assert graph.first_node().index == a
    assert graph.last_node().index == b


def test_clear(diamond) -> None:
    g, _ = diamond

    g.clear()

    assert g.is_empty()
    assert g.edge_count() == 0
    assert g.get_node("A") is None
    assert g.insert_node("A") == 0


def test_insert_logs_at_debug(graph: IndexedGraph, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="indexgraph")

    graph.insert_node("A")

    assert "Inserted node 'A' at index 0" in caplog.text


# ---------------------------------------------------------------------------
# Record ownership
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("attribute", ["id", "index", "value"])
def test_node_records_are_read_only(graph: IndexedGraph, attribute: str) -> None:
    a = graph.insert_node("A", value=1)
    b = graph.insert_node("B")
    graph.insert_edge(a, b)

    with pytest.raises(AttributeError):
        setattr(graph.get_node_record(a), attribute, "Z")

    # The store is untouched, so removal still applies in full
    graph.remove_node(a)
    assert graph.get_node("A") is None
    assert graph.edge_count() == 0
    assert graph.predecessors(b) == []


@pytest.mark.parametrize("attribute", ["index", "from_index", "to_index", "weight"])
def test_edge_records_are_read_only(graph: IndexedGraph, attribute: str) -> None:
    a = graph.insert_node("A")
    edge_index = graph.insert_edge(a, a, 2)

    with pytest.raises(AttributeError):
        setattr(graph.get_edge(edge_index), attribute, "bad")
    for pEdge in graph.edges():
        with pytest.raises(AttributeError):
            pEdge.weight = 5

    assert graph.neighbors(a) == [(edge_index, a, 2)]


def test_payload_update_replaces_record(graph: IndexedGraph) -> None:
    index = graph.insert_node("A", value="old")
    before = graph.get_node_record(index)

    graph.insert_node("A", value="new")

    assert before.value == "old"
    assert graph.get_node_record(index).value == "new"


def test_numpy_integer_indices_accepted(graph: IndexedGraph) -> None:
    a = graph.insert_node("A")
    b = graph.insert_node("B")
    edge_index = graph.insert_edge(np.int64(a), np.int64(b))

    assert graph.neighbors(np.int64(a)) == [(edge_index, b, None)]
    assert type(graph.get_edge(edge_index).from_index) is int


# ---------------------------------------------------------------------------
# Popping nodes
# ---------------------------------------------------------------------------


def test_pop_first_and_last_node(diamond) -> None:
    g, ids = diamond

    first = g.pop_first_node()
    last = g.pop_last_node()

    assert (first.id, first.index) == ("A", ids["A"])
    assert (last.id, last.index) == ("D", ids["D"])
    assert [pNode.id for pNode in g.nodes()] == ["B", "C"]
    # Only B -> C survives the cascades
    assert [(e.from_index, e.to_index) for e in g.edges()] == [(ids["B"], ids["C"])]
    assert g.aNode[ids["A"]] is None and g.aNode[ids["D"]] is None
    assert g.insert_node("A") not in ids.values()


def test_pop_skips_tombstones(graph: IndexedGraph) -> None:
    a, b, c = (graph.insert_node(name) for name in "ABC")
    graph.remove_node(a)
    graph.remove_node(c)

    assert graph.pop_last_node().index == b
    assert graph.pop_first_node() is None
    assert graph.pop_last_node() is None
    assert graph.is_empty()
