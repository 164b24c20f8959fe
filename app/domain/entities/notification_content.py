"""Domain entity representing a rendered alert."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationContent:
    """Subject and HTML body ready to be handed to a notifier."""

    subject: str
    body: str


__all__ = ["NotificationContent"]
