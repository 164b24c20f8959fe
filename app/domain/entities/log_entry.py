"""Domain entity for a single activity log line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogEntry:
    """Timestamped message recorded by the activity log."""

    timestamp: str
    message: str


__all__ = ["LogEntry"]
