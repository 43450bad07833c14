"""Seeded random graph generator for experiments and tests.

Vertices are named ``v0`` .. ``v{n-1}``. With ``ensure_connected`` a
backbone chain ``v0 -> v1 -> ... -> v{n-1}`` is laid down first so every
vertex is reachable from ``v0``; the remaining edges are sampled uniformly.
"""

from __future__ import annotations

import random
from typing import Optional

from .exceptions import InputError
from .graph import Graph
from .logger import Logger


def _sample_weight(rng: random.Random, w_min: int, w_max: int) -> int:
    return rng.randint(w_min, w_max)


def random_graph(
    n: int,
    m: Optional[int] = None,
    *,
    directed: bool = True,
    weighted: bool = True,
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    ensure_connected: bool = True,
    allow_self_loops: bool = False,
    logger: Logger | None = None,
) -> Graph:
    """Generate a random graph.

    Args:
        n: Number of vertices (``n > 0``).
        m: Target number of distinct ``(u, v)`` pairs; defaults to ``4 * n``
            capped by the number of possible pairs.
        directed: Build a directed graph.
        weighted: Build a weighted graph.
        w_min: Smallest weight (``>= 0``).
        w_max: Largest weight (``>= w_min``).
        seed: Seed for :class:`random.Random`.
        ensure_connected: Lay down the backbone chain before sampling.
        allow_self_loops: Permit ``u == v`` edges.
        logger: Optional logger handed to the graph.

    Returns:
        The populated :class:`~pathgraph.graph.Graph`.

    Raises:
        InputError: On invalid sizes or weight bounds.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if w_min < 0:
        raise InputError("w_min must be >= 0 for Dijkstra-safe graphs.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")

    max_pairs = n * n if allow_self_loops else n * (n - 1)
    if not directed:
        max_pairs = (max_pairs + (n if allow_self_loops else 0)) // 2
    target_m = min(4 * n if m is None else m, max_pairs)
    if target_m < 0:
        raise InputError("m must be >= 0.")

    rng = random.Random(seed)
    g = Graph(directed=directed, weighted=weighted, logger=logger)
    g.add_vertices(f"v{i}" for i in range(n))

    seen = set()

    def add_edge(u: int, v: int) -> None:
        if u == v and not allow_self_loops:
            return
        key = (u, v) if directed else (min(u, v), max(u, v))
        if key in seen:
            return
        seen.add(key)
        g.set_edge(f"v{u}", f"v{v}", _sample_weight(rng, w_min, w_max))

    if ensure_connected:
        for i in range(n - 1):
            add_edge(i, i + 1)

    while len(seen) < target_m:
        add_edge(rng.randrange(n), rng.randrange(n))

    return g


__all__ = ["random_graph"]
