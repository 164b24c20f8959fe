"""Outcome of running an event through the notification pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProcessingStatus(Enum):
    """Possible terminal states for a handled event."""

    PROCESSED = "processed"
    IGNORED = "ignored"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessingResult:
    """Final verdict on one event, with the failure detail when relevant."""

    status: ProcessingStatus
    event_type: str
    error: str | None = None

    @classmethod
    def processed(cls, event_type: str) -> "ProcessingResult":
        return cls(status=ProcessingStatus.PROCESSED, event_type=event_type)

    @classmethod
    def ignored(cls, event_type: str) -> "ProcessingResult":
        return cls(status=ProcessingStatus.IGNORED, event_type=event_type)

    @classmethod
    def failed(cls, event_type: str, error: str) -> "ProcessingResult":
        return cls(status=ProcessingStatus.FAILED, event_type=event_type, error=error)

    @property
    def is_failure(self) -> bool:
        return self.status is ProcessingStatus.FAILED


__all__ = ["ProcessingResult", "ProcessingStatus"]
