"""Shared fixtures for the pathgraph test-suite."""

from __future__ import annotations

import pytest

from pathgraph import Graph


@pytest.fixture
def triangle() -> Graph:
    """Undirected weighted triangle A-B=1, B-C=2, A-C=10."""
    g = Graph(directed=False, weighted=True)
    g.add_vertices("ABC")
    g.set_edge("A", "B", 1)
    g.set_edge("B", "C", 2)
    g.set_edge("A", "C", 10)
    return g


@pytest.fixture
def one_way() -> Graph:
    """Directed graph with the single edge A -> B."""
    g = Graph(directed=True, weighted=True)
    g.add_vertices(["A", "B"])
    g.set_edge("A", "B", 4)
    return g
