"""Structured event logging for graph mutations and shortest-path queries."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Protocol, TextIO

from .exceptions import ConfigError


class Logger(Protocol):
    """Protocol accepted by :class:`~pathgraph.graph.Graph` and the engine."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Write one line per event, either ``key=value`` text or a JSON object.

    Args:
        level: Minimum level to emit (``"debug"``, ``"info"`` or ``"warning"``).
        json_fmt: Emit JSON objects instead of plain text.
        stream: Destination stream, ``sys.stderr`` by default.

    Raises:
        ConfigError: If ``level`` is not one of the known levels.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Optional[TextIO] = None,
    ) -> None:
        if level not in self._levels:
            raise ConfigError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        """Return ``True`` if events at ``level`` would be written."""
        return self._levels[level] >= self._levels[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            line = json.dumps(obj, default=str)
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            line = f"{level} {event} {kv}".rstrip()
        self.stream.write(line + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
