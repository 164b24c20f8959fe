"""Errors raised while rendering and delivering payment alerts."""

from __future__ import annotations


class MalformedPayloadError(ValueError):
    """Raised when a monitored event lacks a field needed for rendering."""


class DeliveryError(RuntimeError):
    """Raised when a notifier could not deliver a message."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


__all__ = ["MalformedPayloadError", "DeliveryError"]
