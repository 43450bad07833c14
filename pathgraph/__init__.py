"""Public package exports for :mod:`pathgraph`."""

from __future__ import annotations

from .dijkstra import DijkstraConfig, DijkstraEngine, DijkstraResult, dijkstra
from .exceptions import (
    AlgorithmError,
    ConfigError,
    InputError,
    InvalidWeightError,
    NegativeWeightError,
    NoPathError,
    PathGraphError,
    UnknownVertexError,
)
from .generate import random_graph
from .graph import Edge, Graph, Vertex
from .logger import Logger, NoopLogger, StdLogger
from .path import Path, reconstruct_path

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "Path",
    "reconstruct_path",
    "DijkstraConfig",
    "DijkstraEngine",
    "DijkstraResult",
    "dijkstra",
    "random_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "PathGraphError",
    "InputError",
    "UnknownVertexError",
    "InvalidWeightError",
    "NegativeWeightError",
    "NoPathError",
    "ConfigError",
    "AlgorithmError",
]
