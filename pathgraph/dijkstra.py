"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .exceptions import AlgorithmError, ConfigError, UnknownVertexError
from .logger import Logger, NoopLogger

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph

FRONTIERS = ("heap", "scan")


@dataclass(frozen=True)
class DijkstraConfig:
    """Configuration knobs for the engine.

    Attributes:
        frontier: ``"heap"`` selects the next vertex with a binary heap and
            lazy deletion; ``"scan"`` does a linear scan over unvisited
            vertices (O(V^2)). Both break ties by insertion order and
            produce the same table.
    """

    frontier: str = "heap"

    def __post_init__(self) -> None:
        if self.frontier not in FRONTIERS:
            raise ConfigError(f"unknown frontier {self.frontier!r}; expected one of {FRONTIERS}")


@dataclass(frozen=True)
class DijkstraResult:
    """Distances and predecessors from a single source.

    ``distances[i]`` is ``None`` when vertex ``i`` is unreachable.
    ``predecessors[i]`` is the previous vertex on the best path, the source
    itself for the source, and ``None`` when unreachable.
    """

    source: int
    names: Tuple[str, ...]
    distances: Tuple[Optional[int], ...]
    predecessors: Tuple[Optional[int], ...]

    def _index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise UnknownVertexError(name) from None

    @property
    def source_name(self) -> str:
        return self.names[self.source]

    def distance_to(self, name: str) -> Optional[int]:
        """Return the shortest distance to ``name`` or ``None`` if unreachable."""
        return self.distances[self._index(name)]

    def previous_vertex(self, name: str) -> Optional[str]:
        """Return the name of the predecessor of ``name`` on its shortest path."""
        p = self.predecessors[self._index(name)]
        return None if p is None else self.names[p]

    def is_reachable(self, name: str) -> bool:
        return self.distance_to(name) is not None

    def as_dict(self) -> Dict[str, Tuple[Optional[int], Optional[str]]]:
        """Return ``{name: (distance, predecessor name)}`` for every vertex."""
        return {
            name: (
                self.distances[i],
                None if self.predecessors[i] is None else self.names[self.predecessors[i]],
            )
            for i, name in enumerate(self.names)
        }


class DijkstraEngine:
    """Dijkstra's algorithm over a :class:`~pathgraph.graph.Graph`.

    Weights must be non-negative; the graph enforces this on insertion.
    """

    def __init__(
        self,
        G: "Graph",
        source: int,
        config: Optional[DijkstraConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            G: Graph to search.
            source: Arena index of the source vertex.
            config: Optional engine configuration.
            logger: Optional structured logger.

        Raises:
            AlgorithmError: If ``source`` is not a valid arena index.
        """
        if not (0 <= source < len(G)):
            raise AlgorithmError("source must be a valid vertex index.")
        self.G = G
        self.source = source
        self.cfg = config or DijkstraConfig()
        self.logger = logger or NoopLogger()
        self.counters = {"edges_relaxed": 0, "improvements": 0, "pops": 0}

        n = len(G)
        self.dist: List[Optional[int]] = [None] * n
        self.pred: List[Optional[int]] = [None] * n
        self.dist[source] = 0
        self.pred[source] = source

    def _relax(self, u: int) -> List[int]:
        """Relax every outgoing edge of ``u``; return the improved heads."""
        du = self.dist[u]
        if du is None:
            raise AlgorithmError("cannot relax edges of an unreached vertex.")
        improved: List[int] = []
        for e in self.G.vertex_at(u).edges:
            self.counters["edges_relaxed"] += 1
            cand = du + e.weight
            dv = self.dist[e.target]
            if dv is None or cand < dv:
                self.dist[e.target] = cand
                self.pred[e.target] = u
                self.counters["improvements"] += 1
                improved.append(e.target)
        return improved

    def _solve_scan(self) -> None:
        unvisited = [True] * len(self.dist)
        while True:
            u = -1
            best: Optional[int] = None
            for i, d in enumerate(self.dist):
                if unvisited[i] and d is not None and (best is None or d < best):
                    best = d
                    u = i
            if u < 0:
                # Only unreachable vertices remain.
                return
            unvisited[u] = False
            self.counters["pops"] += 1
            self._relax(u)

    def _solve_heap(self) -> None:
        visited = [False] * len(self.dist)
        pq: List[Tuple[int, int]] = [(0, self.source)]
        while pq:
            d, u = heapq.heappop(pq)
            if visited[u] or d != self.dist[u]:
                continue
            visited[u] = True
            self.counters["pops"] += 1
            for v in self._relax(u):
                if not visited[v]:
                    heapq.heappush(pq, (self.dist[v], v))  # type: ignore[arg-type]

    def solve(self) -> DijkstraResult:
        """Run the search and return the distance/predecessor table."""
        if self.cfg.frontier == "scan":
            self._solve_scan()
        else:
            self._solve_heap()
        names = tuple(self.G.names())
        self.logger.info(
            "dijkstra",
            source=names[self.source],
            n=len(names),
            frontier=self.cfg.frontier,
            **self.counters,
        )
        return DijkstraResult(
            source=self.source,
            names=names,
            distances=tuple(self.dist),
            predecessors=tuple(self.pred),
        )

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)


def dijkstra(G: "Graph", source: str, config: Optional[DijkstraConfig] = None) -> DijkstraResult:
    """Run Dijkstra from the vertex named ``source``."""
    return DijkstraEngine(G, G.index_of(source), config=config, logger=G.logger).solve()


__all__ = ["DijkstraConfig", "DijkstraResult", "DijkstraEngine", "dijkstra"]
