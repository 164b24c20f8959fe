"""Public helpers for turning billing events into alerts."""

from .pipeline import SERVICE_NAME, TEST_EVENT_TYPE, EventPipeline
from .rendering import (
    format_amount,
    render_charge_failed,
    render_invoice_payment_failed,
    render_notification,
)

__all__ = [
    "EventPipeline",
    "SERVICE_NAME",
    "TEST_EVENT_TYPE",
    "format_amount",
    "render_charge_failed",
    "render_invoice_payment_failed",
    "render_notification",
]
