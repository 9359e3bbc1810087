"""Minimal structured event logging for the algorithms and the CLI."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO

from .exceptions import ConfigError


class Logger(Protocol):
    """Anything with ``info`` and ``debug`` event methods."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:
        return

    def debug(self, event: str, **fields: Any) -> None:
        return


class StdLogger:
    """Write one line per event, either ``key=value`` text or JSON.

    Args:
        level: Lowest level written: ``"debug"``, ``"info"`` or ``"warning"``.
        json_fmt: Emit JSON objects instead of text.
        stream: Destination, ``sys.stderr`` by default.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in self._levels:
            raise ConfigError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            self.stream.write(json.dumps(obj, default=str) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
