"""Arena-backed graph representation with named vertices."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .dijkstra import DijkstraConfig, DijkstraEngine, DijkstraResult
from .exceptions import AlgorithmError, InputError, InvalidWeightError, NegativeWeightError, UnknownVertexError
from .logger import Logger, NoopLogger
from .path import Path, reconstruct_path

VertexName = str
Weight = int
EdgeSpec = Union[Tuple[VertexName, VertexName], Tuple[VertexName, VertexName, Weight]]


class Edge:
    """Directed arc to ``target`` (an arena index) with a mutable weight."""

    __slots__ = ("_target", "weight")

    def __init__(self, target: int, weight: Weight = 1) -> None:
        self._target = target
        self.weight = weight

    @property
    def target(self) -> int:
        """Arena index of the head vertex."""
        return self._target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._target == other._target and self.weight == other.weight

    def __hash__(self) -> int:
        # Only the target is immutable; equal edges share a target.
        return hash(self._target)

    def __repr__(self) -> str:
        return f"Edge(target={self._target}, weight={self.weight})"


class Vertex:
    """Named vertex owning its outgoing edges.

    Attributes:
        name: Unique identifier within the owning graph.
        index: Position of the vertex in the graph's arena.
        edges: Read-only view of the outgoing edges in insertion order,
            one per target. Use :meth:`add_edge` to extend it.
    """

    def __init__(self, name: VertexName, index: int, edges: Iterable[Edge] = ()) -> None:
        self.name = name
        self.index = index
        self._edges: List[Edge] = []
        self._by_target: Dict[int, Edge] = {}
        for edge in edges:
            self.add_edge(edge)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def add_edge(self, edge: Edge) -> None:
        """Append ``edge``; a vertex holds at most one edge per target.

        Raises:
            InputError: If an edge to the same target already exists.
        """
        if edge.target in self._by_target:
            raise InputError(f"vertex {self.name!r} already has an edge to {edge.target}")
        self._edges.append(edge)
        self._by_target[edge.target] = edge

    def edge_to(self, target: int) -> Optional[Edge]:
        """Return the edge towards arena index ``target`` or ``None``."""
        return self._by_target.get(target)

    def neighbors(self) -> List[int]:
        """Return the target indices of all outgoing edges in insertion order."""
        return [e.target for e in self._edges]

    def out_degree(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, out_degree={len(self._edges)})"


class Graph:
    """Directed or undirected, weighted or unweighted graph.

    Vertices are stored in an arena and addressed internally by their
    insertion index. In an undirected graph every arc ``a -> b`` has a
    mirror ``b -> a`` carrying the same weight. In an unweighted graph all
    weights are ``1`` whatever the caller supplies.

    Args:
        directed: Whether edges are one-way.
        weighted: Whether edge weights are honoured.
        logger: Optional structured logger for mutation events.

    Examples:
        ```python
        >>> g = Graph(directed=False, weighted=True)
        >>> g.add_vertices("ABC")
        >>> g.set_edge("A", "B", 1)
        >>> g.set_edge("B", "C", 2)
        >>> g.set_edge("A", "C", 10)
        >>> str(g.shortest_path("A", "C"))
        'A -> B -> C'
        ```
    """

    def __init__(
        self,
        directed: bool = False,
        weighted: bool = False,
        logger: Logger | None = None,
    ) -> None:
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self.logger = logger or NoopLogger()
        self._vertices: List[Vertex] = []
        self._index: Dict[VertexName, int] = {}

    # ---------- configuration ---------------------------------------------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    # ---------- vertices --------------------------------------------------

    def add_vertex(self, name: VertexName) -> Vertex:
        """Add a vertex named ``name`` unless it already exists.

        Returns:
            The new or existing :class:`Vertex`.
        """
        idx = self._index.get(name)
        if idx is not None:
            return self._vertices[idx]
        vertex = Vertex(name, len(self._vertices))
        self._vertices.append(vertex)
        self._index[name] = vertex.index
        self.logger.debug("vertex_added", name=name, index=vertex.index)
        return vertex

    def add_vertices(self, names: Iterable[VertexName]) -> None:
        for name in names:
            self.add_vertex(name)

    def set_vertices(self, names: Iterable[VertexName]) -> None:
        """Replace every vertex (and therefore every edge) with ``names``."""
        self._vertices = []
        self._index = {}
        self.add_vertices(names)

    def has_vertex(self, name: VertexName) -> bool:
        return name in self._index

    def get_vertex(self, name: VertexName) -> Vertex:
        """Return the vertex called ``name``.

        Raises:
            UnknownVertexError: If no such vertex exists.
        """
        return self._vertices[self.index_of(name)]

    def index_of(self, name: VertexName) -> int:
        """Return the arena index of ``name``.

        Raises:
            UnknownVertexError: If no such vertex exists.
        """
        try:
            return self._index[name]
        except KeyError:
            raise UnknownVertexError(name) from None

    def vertex_at(self, index: int) -> Vertex:
        return self._vertices[index]

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """All vertices in insertion order."""
        return tuple(self._vertices)

    def names(self) -> List[VertexName]:
        return [v.name for v in self._vertices]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[VertexName]:
        return iter(self.names())

    # ---------- edges -----------------------------------------------------

    def _check_weight(self, v1: VertexName, v2: VertexName, weight: Weight) -> Weight:
        if not self._weighted:
            return 1
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(f"non-integer weight {weight!r} on edge ({v1!r}, {v2!r})")
        if weight < 0:
            raise NegativeWeightError(f"negative weight {weight} on edge ({v1!r}, {v2!r})")
        return weight

    def set_edge(self, v1: VertexName, v2: VertexName, weight: Weight = 1) -> None:
        """Create the edge ``v1 -> v2`` or update its weight in place.

        Undirected graphs mirror the change onto ``v2 -> v1``.

        Args:
            v1: Tail vertex name.
            v2: Head vertex name.
            weight: Non-negative integer weight; forced to ``1`` when the
                graph is unweighted.

        Raises:
            UnknownVertexError: If either vertex does not exist.
            InvalidWeightError: If ``weight`` is not an integer.
            NegativeWeightError: If ``weight`` is negative.
        """
        a = self.get_vertex(v1)
        b = self.get_vertex(v2)
        weight = self._check_weight(v1, v2, weight)

        existing = a.edge_to(b.index)
        if existing is not None:
            existing.weight = weight
            if not self._directed:
                mirror = b.edge_to(a.index)
                if mirror is None:
                    raise AlgorithmError(f"missing mirror edge ({v2!r}, {v1!r})")
                mirror.weight = weight
            self.logger.debug("edge_updated", u=v1, v=v2, w=weight)
            return

        a.add_edge(Edge(b.index, weight))
        # A self-loop is its own mirror.
        if not self._directed and a is not b:
            b.add_edge(Edge(a.index, weight))
        self.logger.debug("edge_added", u=v1, v=v2, w=weight)

    def are_neighbors(self, v1: VertexName, v2: VertexName) -> bool:
        """Return ``True`` if ``v1`` has an outgoing edge to ``v2``."""
        a = self.get_vertex(v1)
        return a.edge_to(self.index_of(v2)) is not None

    def get_weight_of_edge(self, v1: VertexName, v2: VertexName) -> Optional[Weight]:
        """Return the weight of ``v1 -> v2``, or ``None`` if there is no edge.

        A zero-weight edge returns ``0``; absence is always ``None``.
        """
        edge = self.get_vertex(v1).edge_to(self.index_of(v2))
        return None if edge is None else edge.weight

    def neighbors(self, name: VertexName) -> List[VertexName]:
        """Return the names of the outgoing neighbors of ``name``."""
        return [self._vertices[t].name for t in self.get_vertex(name).neighbors()]

    def edges(self) -> Iterator[Tuple[VertexName, VertexName, Weight]]:
        """Iterate ``(u, v, w)`` over every stored arc."""
        for u in self._vertices:
            for e in u.edges:
                yield u.name, self._vertices[e.target].name, e.weight

    def edge_count(self) -> int:
        """Number of stored arcs; undirected edges count in both directions."""
        return sum(v.out_degree() for v in self._vertices)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeSpec],
        directed: bool = False,
        weighted: bool = True,
        vertices: Sequence[VertexName] = (),
        logger: Logger | None = None,
    ) -> "Graph":
        """Create a graph from ``(u, v)`` or ``(u, v, w)`` tuples.

        Vertices are added in the order they are first seen, after any
        names listed in ``vertices``. Unlike the constructor, ``weighted``
        defaults to ``True`` so that the third tuple element is honoured;
        pass ``weighted=False`` to force every weight to ``1``.
        """
        g = cls(directed=directed, weighted=weighted, logger=logger)
        g.add_vertices(vertices)
        for item in edges:
            if len(item) == 2:
                u, v = item  # type: ignore[misc]
                w: Weight = 1
            elif len(item) == 3:
                u, v, w = item  # type: ignore[misc]
            else:
                raise InputError(f"edge must be (u, v) or (u, v, w), got {item!r}")
            g.add_vertex(u)
            g.add_vertex(v)
            g.set_edge(u, v, w)
        return g

    # ---------- shortest paths --------------------------------------------

    def shortest_path_table(
        self, source: VertexName, config: Optional[DijkstraConfig] = None
    ) -> DijkstraResult:
        """Run Dijkstra from ``source`` and return the distance table."""
        engine = DijkstraEngine(self, self.index_of(source), config=config, logger=self.logger)
        return engine.solve()

    def shortest_path(
        self,
        source: VertexName,
        target: VertexName,
        config: Optional[DijkstraConfig] = None,
    ) -> Path:
        """Return the shortest path from ``source`` to ``target``.

        Raises:
            UnknownVertexError: If either vertex does not exist.
            NoPathError: If ``target`` is unreachable from ``source``.
        """
        t = self.index_of(target)
        table = self.shortest_path_table(source, config=config)
        chain = reconstruct_path(table.predecessors, table.source, t, names=table.names)
        return Path([self._vertices[i] for i in chain])

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, weighted={self._weighted}, "
            f"vertices={len(self._vertices)}, arcs={self.edge_count()})"
        )


__all__ = ["Edge", "Vertex", "Graph", "VertexName", "Weight"]
