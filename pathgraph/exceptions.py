"""Custom exception types used across :mod:`pathgraph`."""

from __future__ import annotations


class PathGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(PathGraphError, ValueError):
    """Raised for invalid user input such as malformed edges or paths."""


class UnknownVertexError(InputError, KeyError):
    """Raised when a vertex name is not present in the graph."""

    def __init__(self, name: object) -> None:
        super().__init__(f"unknown vertex {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise render the message with extra quotes.
        return str(self.args[0])


class InvalidWeightError(InputError):
    """Raised when an edge weight is not an integer."""


class NegativeWeightError(InvalidWeightError):
    """Raised when inserting an edge with a negative weight."""


class NoPathError(PathGraphError, LookupError):
    """Raised when the target of a path query is unreachable from the source."""

    def __init__(self, source: object, target: object) -> None:
        super().__init__(f"no path from {source!r} to {target!r}")
        self.source = source
        self.target = target


class ConfigError(PathGraphError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(PathGraphError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "PathGraphError",
    "InputError",
    "UnknownVertexError",
    "InvalidWeightError",
    "NegativeWeightError",
    "NoPathError",
    "ConfigError",
    "AlgorithmError",
]
