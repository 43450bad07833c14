"""Tests for the Dijkstra engine and its distance table."""

from __future__ import annotations

import io
import json

import networkx as nx
import pytest

from pathgraph import (
    AlgorithmError,
    ConfigError,
    DijkstraConfig,
    DijkstraEngine,
    Graph,
    StdLogger,
    UnknownVertexError,
    dijkstra,
    random_graph,
)
from pathgraph.visualize import to_networkx

FRONTIERS = ["heap", "scan"]


@pytest.mark.parametrize("frontier", FRONTIERS)
def test_triangle_table(triangle: Graph, frontier: str) -> None:
    table = triangle.shortest_path_table("A", DijkstraConfig(frontier=frontier))
    assert table.source_name == "A"
    assert table.as_dict() == {
        "A": (0, "A"),
        "B": (1, "A"),
        "C": (3, "B"),
    }


@pytest.mark.parametrize("frontier", FRONTIERS)
def test_unreachable_vertices_have_no_distance(frontier: str) -> None:
    g = Graph(directed=True, weighted=True)
    g.add_vertices(["s", "a", "island"])
    g.set_edge("s", "a", 5)
    table = g.shortest_path_table("s", DijkstraConfig(frontier=frontier))
    assert table.distance_to("a") == 5
    assert table.distance_to("island") is None
    assert table.previous_vertex("island") is None
    assert not table.is_reachable("island")
    assert table.is_reachable("s")


@pytest.mark.parametrize("frontier", FRONTIERS)
def test_ties_keep_first_predecessor(frontier: str) -> None:
    # Two equal-cost routes to t; the one through the earlier vertex wins.
    g = Graph(directed=True, weighted=True)
    g.add_vertices(["s", "a", "b", "t"])
    g.set_edge("s", "b", 1)
    g.set_edge("s", "a", 1)
    g.set_edge("a", "t", 1)
    g.set_edge("b", "t", 1)
    table = g.shortest_path_table("s", DijkstraConfig(frontier=frontier))
    assert table.distance_to("t") == 2
    assert table.previous_vertex("t") == "a"


@pytest.mark.parametrize("frontier", FRONTIERS)
def test_zero_weight_edges(frontier: str) -> None:
    g = Graph.from_edges([("a", "b", 0), ("b", "c", 0), ("a", "c", 1)], directed=True)
    table = dijkstra(g, "a", DijkstraConfig(frontier=frontier))
    assert table.distance_to("c") == 0
    assert table.previous_vertex("c") == "b"


def test_unknown_source_raises(triangle: Graph) -> None:
    with pytest.raises(UnknownVertexError):
        triangle.shortest_path_table("Q")
    table = triangle.shortest_path_table("A")
    with pytest.raises(UnknownVertexError):
        table.distance_to("Q")


def test_engine_rejects_bad_index(triangle: Graph) -> None:
    with pytest.raises(AlgorithmError):
        DijkstraEngine(triangle, 3)


def test_unknown_frontier_is_config_error() -> None:
    with pytest.raises(ConfigError, match="unknown frontier"):
        DijkstraConfig(frontier="fibonacci")


def test_counters(triangle: Graph) -> None:
    engine = DijkstraEngine(triangle, triangle.index_of("A"), DijkstraConfig(frontier="scan"))
    engine.solve()
    summary = engine.summary()
    assert summary["pops"] == 3
    assert summary["edges_relaxed"] == 6
    # B (1) and C (10) from A, then C improved to 3 through B.
    assert summary["improvements"] == 3


def test_engine_logs_run_event(triangle: Graph) -> None:
    stream = io.StringIO()
    logger = StdLogger(level="info", json_fmt=True, stream=stream)
    DijkstraEngine(triangle, 0, logger=logger).solve()
    event = json.loads(stream.getvalue().strip())
    assert event["event"] == "dijkstra"
    assert event["source"] == "A"
    assert event["frontier"] == "heap"
    assert event["pops"] == 3


@pytest.mark.parametrize("directed", [True, False])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_networkx(directed: bool, seed: int) -> None:
    g = random_graph(40, 160, directed=directed, w_min=0, w_max=20, seed=seed, ensure_connected=seed % 2 == 0)
    expected = nx.single_source_dijkstra_path_length(to_networkx(g), "v0")
    heap = g.shortest_path_table("v0", DijkstraConfig(frontier="heap"))
    scan = g.shortest_path_table("v0", DijkstraConfig(frontier="scan"))
    assert heap == scan
    for name in g.names():
        assert heap.distance_to(name) == expected.get(name)


def test_result_is_immutable_and_hashable(triangle: Graph) -> None:
    table = triangle.shortest_path_table("A")
    assert table.distances == (0, 1, 3)
    assert table.predecessors == (0, 0, 1)
    with pytest.raises(TypeError):
        table.distances[2] = 0  # type: ignore[index]
    assert hash(table) == hash(triangle.shortest_path_table("A"))
