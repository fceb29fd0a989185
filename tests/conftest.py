"""Shared fixtures for indexgraph tests."""

from __future__ import annotations

from typing import Dict

import pytest

from indexgraph import IndexedGraph


@pytest.fixture
def graph() -> IndexedGraph:
    return IndexedGraph()


@pytest.fixture
def diamond() -> tuple[IndexedGraph, Dict[str, int]]:
    """
    A -> B -> D, A -> C -> D, with a B -> C shortcut, every edge weight 1.

    Edges are inserted in the order A->B, B->D, A->C, C->D, B->C.
    """
    g = IndexedGraph()
    ids = {name: g.insert_node(name) for name in "ABCD"}
    g.insert_edge(ids["A"], ids["B"], 1)
    g.insert_edge(ids["B"], ids["D"], 1)
    g.insert_edge(ids["A"], ids["C"], 1)
    g.insert_edge(ids["C"], ids["D"], 1)
    g.insert_edge(ids["B"], ids["C"], 1)
    return g, ids
