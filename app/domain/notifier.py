"""Delivery capability used by the notification pipeline."""

from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    """Anything that can deliver a rendered alert to the configured recipient.

    Implementations raise :class:`app.domain.exceptions.DeliveryError` when
    the message could not be delivered.
    """

    recipient: str

    def send(self, subject: str, body: str) -> None:
        ...


__all__ = ["Notifier"]
