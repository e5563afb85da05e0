"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from acyclic_lite.graph.adjacency import Graph


@pytest.fixture
def empty_graph() -> Graph[str]:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph[str]:
    """A -> B -> C -> D"""
    return Graph.from_edges([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def diamond_graph() -> Graph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    return Graph.from_edges([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])


@pytest.fixture
def wide_dag() -> Graph[str]:
    """Root with 10 children, each with 2 grandchildren (all leaves)."""
    g: Graph[str] = Graph()
    for i in range(10):
        child = f"L1_{i}"
        g.add_edge("root", child)
        for j in range(2):
            g.add_edge(child, f"L2_{i}_{j}")
    return g
