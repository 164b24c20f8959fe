"""Bounded in-memory history of the service's own activity."""

from __future__ import annotations

import logging
from collections import deque
from threading import Lock
from typing import Deque

from app.domain.entities import LogEntry
from app.utils import utc_now_iso

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class ActivityLog:
    """Keep the most recent ``capacity`` log entries, oldest first.

    Appends beyond the capacity silently evict the oldest entry. Every entry is
    also forwarded to the module logger so it shows up in the process output.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._lock = Lock()

    def append(self, message: str) -> LogEntry:
        """Record ``message`` with the current timestamp."""

        entry = LogEntry(timestamp=utc_now_iso(), message=message)
        with self._lock:
            self._entries.append(entry)
        logger.info("[%s] %s", entry.timestamp, message)
        return entry

    def recent(self, n: int) -> list[LogEntry]:
        """Return up to the last ``n`` entries, most recent last."""

        if n <= 0:
            return []
        with self._lock:
            entries = list(self._entries)
        return entries[-n:]

    def size(self) -> int:
        with self._lock:
            return len(self._entries)


activity_log = ActivityLog()


__all__ = ["ActivityLog", "activity_log", "DEFAULT_CAPACITY"]
