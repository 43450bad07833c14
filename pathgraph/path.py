"""Paths through a graph and their reconstruction from predecessor arrays."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Tuple

from .exceptions import InputError, NoPathError

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Vertex


def reconstruct_path(
    predecessors: Sequence[Optional[int]],
    source: int,
    target: int,
    names: Optional[Sequence[str]] = None,
) -> List[int]:
    """Return the vertex indices from ``source`` to ``target`` (inclusive).

    Args:
        predecessors: Predecessor of each vertex, ``None`` if unreached.
        source: Source vertex index.
        target: Target vertex index.
        names: Optional vertex names used in the error message.

    Raises:
        NoPathError: If the predecessor chain from ``target`` never reaches
            ``source``.

    Notes:
        The walk is bounded by ``len(predecessors)`` steps so a corrupt
        chain cannot loop forever.
    """
    n = len(predecessors)
    if not (0 <= source < n and 0 <= target < n):
        raise InputError("source/target out of range.")

    chain: List[int] = []
    cur: Optional[int] = target
    for _ in range(n):
        if cur is None:
            break
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        cur = predecessors[cur]

    if names is None:
        raise NoPathError(source, target)
    raise NoPathError(names[source], names[target])


class Path:
    """An ordered walk through a graph.

    The total distance is the sum of the weights of the edges joining
    consecutive vertices and is recomputed whenever the sequence changes.

    Raises:
        InputError: If two consecutive vertices are not joined by an edge.
    """

    def __init__(self, vertices: Iterable["Vertex"]) -> None:
        self._vertices: Tuple["Vertex", ...] = ()
        self._distance = 0
        self.set_path(vertices)

    @staticmethod
    def _calculate_distance(vertices: Sequence["Vertex"]) -> int:
        dist = 0
        for a, b in zip(vertices, vertices[1:]):
            edge = a.edge_to(b.index)
            if edge is None:
                raise InputError(f"no edge between {a.name!r} and {b.name!r}")
            dist += edge.weight
        return dist

    def set_path(self, vertices: Iterable["Vertex"]) -> None:
        """Replace the sequence and recompute the distance."""
        seq = tuple(vertices)
        self._distance = self._calculate_distance(seq)
        self._vertices = seq

    @property
    def vertices(self) -> Tuple["Vertex", ...]:
        return self._vertices

    @property
    def names(self) -> List[str]:
        return [v.name for v in self._vertices]

    @property
    def total_distance(self) -> int:
        return self._distance

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator["Vertex"]:
        return iter(self._vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.names == other.names and self._distance == other._distance

    def __str__(self) -> str:
        return " -> ".join(str(v.name) for v in self._vertices)

    def __repr__(self) -> str:
        return f"Path({self.names!r}, total_distance={self._distance})"


__all__ = ["Path", "reconstruct_path"]
