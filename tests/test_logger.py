"""Tests for the structured logger and graph mutation events."""

from __future__ import annotations

import io
import json

import pytest

from pathgraph import ConfigError, Graph, StdLogger


def test_text_format_and_level_filter() -> None:
    stream = io.StringIO()
    log = StdLogger(level="info", stream=stream)
    log.debug("hidden", a=1)
    log.info("shown", a=1, b="x")
    log.warning("bare")
    assert stream.getvalue().splitlines() == ["info shown a=1 b=x", "warning bare"]


def test_json_format() -> None:
    stream = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=stream).debug("evt", n=3)
    assert json.loads(stream.getvalue()) == {"level": "debug", "event": "evt", "n": 3}


def test_unknown_level_is_config_error() -> None:
    with pytest.raises(ConfigError):
        StdLogger(level="trace")


def test_graph_emits_mutation_events() -> None:
    stream = io.StringIO()
    g = Graph(directed=True, weighted=True, logger=StdLogger(level="debug", stream=stream))
    g.add_vertex("a")
    g.add_vertex("b")
    g.add_vertex("a")
    g.set_edge("a", "b", 2)
    g.set_edge("a", "b", 3)
    assert stream.getvalue().splitlines() == [
        "debug vertex_added name=a index=0",
        "debug vertex_added name=b index=1",
        "debug edge_added u=a v=b w=2",
        "debug edge_updated u=a v=b w=3",
    ]
