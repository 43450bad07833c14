"""Tests for the random graph generator."""

from __future__ import annotations

import pytest

from pathgraph import InputError, random_graph


def test_backbone_makes_every_vertex_reachable() -> None:
    g = random_graph(25, 30, directed=True, seed=7)
    table = g.shortest_path_table("v0")
    assert all(table.is_reachable(name) for name in g.names())


def test_same_seed_same_graph() -> None:
    a = random_graph(15, 40, seed=3)
    b = random_graph(15, 40, seed=3)
    assert list(a.edges()) == list(b.edges())


def test_weights_within_bounds_and_edge_count() -> None:
    g = random_graph(10, 30, directed=True, w_min=2, w_max=5, seed=1)
    assert g.edge_count() == 30
    assert all(2 <= w <= 5 for _, _, w in g.edges())
    assert all(u != v for u, v, _ in g.edges())


def test_undirected_and_unweighted() -> None:
    g = random_graph(6, 100, directed=False, weighted=False, seed=0)
    # Complete graph on 6 vertices: 15 edges, stored in both directions.
    assert g.edge_count() == 30
    assert {w for _, _, w in g.edges()} == {1}


@pytest.mark.parametrize(
    "kwargs",
    [{"n": 0}, {"n": 3, "w_min": -1}, {"n": 3, "w_min": 5, "w_max": 4}, {"n": 3, "m": -1}],
)
def test_invalid_arguments(kwargs) -> None:
    with pytest.raises(InputError):
        random_graph(**kwargs)
