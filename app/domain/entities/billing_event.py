"""Domain entity describing an inbound billing provider event."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

CHARGE_FAILED = "charge.failed"
INVOICE_PAYMENT_FAILED = "invoice.payment_failed"
MONITORED_EVENT_TYPES: tuple[str, ...] = (CHARGE_FAILED, INVOICE_PAYMENT_FAILED)


class EventKind(Enum):
    """Classification of an inbound event type."""

    CHARGE_FAILED = CHARGE_FAILED
    INVOICE_PAYMENT_FAILED = INVOICE_PAYMENT_FAILED
    UNKNOWN = "unknown"

    @classmethod
    def classify(cls, event_type: str) -> "EventKind":
        for kind in (cls.CHARGE_FAILED, cls.INVOICE_PAYMENT_FAILED):
            if kind.value == event_type:
                return kind
        return cls.UNKNOWN


@dataclass(frozen=True)
class BillingEvent:
    """Webhook event as delivered by the billing provider."""

    type: str
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> EventKind:
        return EventKind.classify(self.type)

    @property
    def payload_object(self) -> Mapping[str, Any] | None:
        """Return ``data.object`` when the provider supplied one."""

        candidate = self.data.get("object") if isinstance(self.data, Mapping) else None
        return candidate if isinstance(candidate, Mapping) else None


__all__ = [
    "BillingEvent",
    "EventKind",
    "CHARGE_FAILED",
    "INVOICE_PAYMENT_FAILED",
    "MONITORED_EVENT_TYPES",
]
