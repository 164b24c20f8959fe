"""Domain entities exposed by the application."""

from .billing_event import (
    CHARGE_FAILED,
    INVOICE_PAYMENT_FAILED,
    MONITORED_EVENT_TYPES,
    BillingEvent,
    EventKind,
)
from .log_entry import LogEntry
from .notification_content import NotificationContent
from .processing_result import ProcessingResult, ProcessingStatus

__all__ = [
    "BillingEvent",
    "EventKind",
    "CHARGE_FAILED",
    "INVOICE_PAYMENT_FAILED",
    "MONITORED_EVENT_TYPES",
    "LogEntry",
    "NotificationContent",
    "ProcessingResult",
    "ProcessingStatus",
]
