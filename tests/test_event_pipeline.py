"""Tests for the event classification and delivery pipeline."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import EventPipeline
from app.domain.entities import BillingEvent, ProcessingStatus
from app.infrastructure.activity_log import ActivityLog

CHARGE_EVENT = BillingEvent(
    type="charge.failed",
    data={
        "object": {
            "amount": 2599,
            "currency": "usd",
            "id": "ch_1",
            "created": 1700000000,
            "customer": "cus_1",
        }
    },
)


@pytest.fixture()
def log() -> ActivityLog:
    return ActivityLog()


def _messages(log: ActivityLog) -> list[str]:
    return [entry.message for entry in log.recent(100)]


def test_charge_failed_is_processed(log, notifier) -> None:
    result = EventPipeline(log, notifier).handle(CHARGE_EVENT)

    assert result.status is ProcessingStatus.PROCESSED
    assert result.event_type == "charge.failed"
    assert result.error is None
    assert log.size() == 2
    assert _messages(log) == [
        "Received webhook: charge.failed",
        "Payment failure notification sent for event: charge.failed",
    ]
    subject, _body = notifier.sent[0]
    assert "$25.99 USD" in subject


def test_delivery_failure_is_reported(log, failing_notifier) -> None:
    result = EventPipeline(log, failing_notifier).handle(CHARGE_EVENT)

    assert result.status is ProcessingStatus.FAILED
    assert result.error == "quota exceeded"
    assert result.is_failure
    assert log.size() == 2
    assert _messages(log)[-1] == (
        "Failed to send notification for charge.failed: quota exceeded"
    )


@pytest.mark.parametrize("event_type", ["customer.created", "charge.succeeded", ""])
def test_unmonitored_event_is_ignored(log, notifier, event_type: str) -> None:
    result = EventPipeline(log, notifier).handle(BillingEvent(type=event_type, data={}))

    assert result.status is ProcessingStatus.IGNORED
    assert notifier.sent == []
    assert _messages(log) == [
        f"Received webhook: {event_type}",
        f"Ignored webhook event: {event_type}",
    ]


def test_ignored_event_adds_single_entry_after_received(log, notifier) -> None:
    EventPipeline(log, notifier).handle(BillingEvent(type="customer.created", data={}))

    assert log.size() == 2
    assert log.recent(1)[0].message == "Ignored webhook event: customer.created"


def test_malformed_payload_fails_without_sending(log, notifier) -> None:
    event = BillingEvent(
        type="invoice.payment_failed",
        data={"object": {"currency": "usd", "customer": "cus_1", "attempt_count": 1}},
    )

    result = EventPipeline(log, notifier).handle(event)

    assert result.status is ProcessingStatus.FAILED
    assert "amount_due" in result.error
    assert notifier.sent == []
    assert log.size() == 2
    assert _messages(log)[-1].startswith(
        "Failed to send notification for invoice.payment_failed: "
    )


def test_unexpected_notifier_error_is_contained(log) -> None:
    class ExplodingNotifier:
        recipient = "alerts@example.com"

        def send(self, subject: str, body: str) -> None:
            raise ConnectionError("connection reset")

    result = EventPipeline(log, ExplodingNotifier()).handle(CHARGE_EVENT)

    assert result.status is ProcessingStatus.FAILED
    assert result.error == "connection reset"


def test_trigger_test_sends_fixed_notification(log, notifier) -> None:
    result = EventPipeline(log, notifier).trigger_test()

    assert result.status is ProcessingStatus.PROCESSED
    assert result.event_type == "test"
    subject, body = notifier.sent[0]
    assert subject == "🧪 Test: Stripe Payment Failure Monitor"
    assert "charge.failed, invoice.payment_failed" in body
    assert "alerts@example.com" in body
    assert _messages(log) == [
        "Manual test triggered",
        "Test notification sent to alerts@example.com",
    ]


def test_trigger_test_reports_failure(log, failing_notifier) -> None:
    result = EventPipeline(log, failing_notifier).trigger_test()

    assert result.status is ProcessingStatus.FAILED
    assert result.error == "quota exceeded"
    assert _messages(log)[-1] == "Test failed: quota exceeded"


def test_invalid_timezone_setting_does_not_fail_events(
    log, notifier, monkeypatch: pytest.MonkeyPatch
) -> None:
    from app.config import reset_settings_cache
    from app.utils.datetime import get_app_timezone

    monkeypatch.setenv("APP_TIMEZONE", "UTC+25")
    reset_settings_cache()
    get_app_timezone.cache_clear()

    result = EventPipeline(log, notifier).handle(CHARGE_EVENT)

    assert result.status is ProcessingStatus.PROCESSED
    assert result.error is None
