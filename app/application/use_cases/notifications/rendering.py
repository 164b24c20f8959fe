"""Render payment failure events into alert emails."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from html import escape
from typing import Any, Callable, Mapping

from app.domain.entities import BillingEvent, EventKind, NotificationContent
from app.domain.exceptions import MalformedPayloadError
from app.config import DEFAULT_DASHBOARD_URL
from app.utils import format_unix_timestamp, get_app_timezone

_MISSING = object()
_CENTS = Decimal("0.01")


def _field(payload: Mapping[str, Any], name: str, event_type: str) -> Any:
    value = payload.get(name, _MISSING)
    if value is _MISSING or value is None:
        raise MalformedPayloadError(
            f"Missing required field '{name}' for {event_type}"
        )
    return value


def _optional(payload: Mapping[str, Any], name: str, default: str) -> Any:
    value = payload.get(name)
    return value if value not in (None, "") else default


def _payload_object(event: BillingEvent) -> Mapping[str, Any]:
    payload = event.payload_object
    if payload is None:
        raise MalformedPayloadError(f"Missing data.object for {event.type}")
    return payload


def format_amount(minor_units: Any, event_type: str, field_name: str) -> str:
    """Convert an amount in minor currency units to ``"25.99"``."""

    if isinstance(minor_units, bool):
        raise MalformedPayloadError(f"Field '{field_name}' must be numeric for {event_type}")
    try:
        amount = Decimal(str(minor_units)) / 100
    except (InvalidOperation, ValueError) as exc:
        raise MalformedPayloadError(
            f"Field '{field_name}' must be numeric for {event_type}"
        ) from exc
    if not amount.is_finite():
        raise MalformedPayloadError(f"Field '{field_name}' must be numeric for {event_type}")
    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


def _format_currency(value: Any, event_type: str) -> str:
    if not isinstance(value, str):
        raise MalformedPayloadError(f"Field 'currency' must be a string for {event_type}")
    return value.upper()


def _format_timestamp(value: Any, field_name: str, event_type: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedPayloadError(
            f"Field '{field_name}' must be a unix timestamp for {event_type}"
        )
    tz = get_app_timezone()
    try:
        return format_unix_timestamp(value, tz)
    except (OverflowError, OSError, ValueError) as exc:
        raise MalformedPayloadError(
            f"Field '{field_name}' must be a unix timestamp for {event_type}"
        ) from exc


def _row(label: str, value: Any) -> str:
    return f"<p><strong>{label}:</strong> {escape(str(value))}</p>"


def _footer(url: str, label: str) -> str:
    return (
        "<hr>"
        f'<p><small>View in Stripe Dashboard: <a href="{escape(url)}">{label}</a></small></p>'
    )


def render_charge_failed(
    event: BillingEvent, dashboard_url: str = DEFAULT_DASHBOARD_URL
) -> NotificationContent:
    """Render a ``charge.failed`` event."""

    charge = _payload_object(event)
    amount = format_amount(_field(charge, "amount", event.type), event.type, "amount")
    currency = _format_currency(_field(charge, "currency", event.type), event.type)
    charge_id = _field(charge, "id", event.type)
    created = _format_timestamp(_field(charge, "created", event.type), "created", event.type)

    subject = f"💳 Payment Failure Alert - ${amount} {currency}"
    body = "".join(
        (
            "<h2>🚨 Charge Failed</h2>",
            _row("Amount", f"${amount} {currency}"),
            _row("Customer ID", _optional(charge, "customer", "Guest")),
            _row("Failure Code", _optional(charge, "failure_code", "Unknown")),
            _row(
                "Failure Message",
                _optional(charge, "failure_message", "No details provided"),
            ),
            _row("Charge ID", charge_id),
            _row("Time", created),
            _footer(f"{dashboard_url.rstrip('/')}/payments/{charge_id}", "Open Charge"),
        )
    )
    return NotificationContent(subject=subject, body=body)


def render_invoice_payment_failed(
    event: BillingEvent, dashboard_url: str = DEFAULT_DASHBOARD_URL
) -> NotificationContent:
    """Render an ``invoice.payment_failed`` event."""

    invoice = _payload_object(event)
    amount = format_amount(
        _field(invoice, "amount_due", event.type), event.type, "amount_due"
    )
    currency = _format_currency(_field(invoice, "currency", event.type), event.type)
    customer = _field(invoice, "customer", event.type)
    attempt_count = _field(invoice, "attempt_count", event.type)
    invoice_id = _field(invoice, "id", event.type)

    next_attempt = invoice.get("next_payment_attempt")
    if not next_attempt:
        next_attempt_text = "No retry scheduled"
    else:
        next_attempt_text = _format_timestamp(
            next_attempt, "next_payment_attempt", event.type
        )

    subject = f"📋 Subscription Payment Failure - ${amount} {currency}"
    body = "".join(
        (
            "<h2>🚨 Invoice Payment Failed</h2>",
            _row("Amount", f"${amount} {currency}"),
            _row("Customer ID", customer),
            _row("Invoice Number", _optional(invoice, "number", "Draft")),
            _row("Subscription ID", _optional(invoice, "subscription", "N/A")),
            _row("Attempt Count", attempt_count),
            _row("Next Attempt", next_attempt_text),
            _footer(f"{dashboard_url.rstrip('/')}/invoices/{invoice_id}", "Open Invoice"),
        )
    )
    return NotificationContent(subject=subject, body=body)


_RENDERERS: dict[EventKind, Callable[[BillingEvent, str], NotificationContent]] = {
    EventKind.CHARGE_FAILED: render_charge_failed,
    EventKind.INVOICE_PAYMENT_FAILED: render_invoice_payment_failed,
}


def render_notification(
    event: BillingEvent, dashboard_url: str = DEFAULT_DASHBOARD_URL
) -> NotificationContent | None:
    """Return the alert for ``event`` or ``None`` when its type is not monitored.

    Raises :class:`MalformedPayloadError` when a monitored event lacks the
    fields required to describe it.
    """

    renderer = _RENDERERS.get(event.kind)
    if renderer is None:
        return None
    return renderer(event, dashboard_url)


__all__ = [
    "format_amount",
    "render_charge_failed",
    "render_invoice_payment_failed",
    "render_notification",
]
