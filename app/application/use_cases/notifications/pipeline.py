"""Classify billing events, deliver alerts and record the outcome."""

from __future__ import annotations

import logging

from app.config import DEFAULT_DASHBOARD_URL
from app.domain.entities import (
    MONITORED_EVENT_TYPES,
    BillingEvent,
    EventKind,
    NotificationContent,
    ProcessingResult,
)
from app.domain.exceptions import DeliveryError, MalformedPayloadError
from app.domain.notifier import Notifier
from app.infrastructure.activity_log import ActivityLog
from app.utils import format_local_datetime, now_in_app_timezone

from .rendering import render_notification

logger = logging.getLogger(__name__)

SERVICE_NAME = "Stripe Payment Failure Monitor"
TEST_EVENT_TYPE = "test"


class EventPipeline:
    """Turn inbound events into delivered alerts plus activity log entries.

    ``handle`` and ``trigger_test`` never raise: every failure is reported
    through the returned :class:`ProcessingResult` and the activity log.
    """

    def __init__(
        self,
        activity_log: ActivityLog,
        notifier: Notifier,
        *,
        dashboard_url: str = DEFAULT_DASHBOARD_URL,
    ) -> None:
        self._activity_log = activity_log
        self._notifier = notifier
        self._dashboard_url = dashboard_url

    @property
    def recipient(self) -> str:
        return self._notifier.recipient

    def handle(self, event: BillingEvent) -> ProcessingResult:
        """Process a single inbound event end to end."""

        self._activity_log.append(f"Received webhook: {event.type}")

        if event.kind is EventKind.UNKNOWN:
            self._activity_log.append(f"Ignored webhook event: {event.type}")
            return ProcessingResult.ignored(event.type)

        try:
            content = render_notification(event, self._dashboard_url)
            if content is None:
                raise MalformedPayloadError(f"Unable to render {event.type}")
            self._deliver(content)
        except (MalformedPayloadError, DeliveryError) as exc:
            return self._record_failure(event.type, exc)
        except Exception as exc:
            logger.exception("Unexpected error while handling %s", event.type)
            return self._record_failure(event.type, exc)

        self._activity_log.append(
            f"Payment failure notification sent for event: {event.type}"
        )
        return ProcessingResult.processed(event.type)

    def trigger_test(self) -> ProcessingResult:
        """Send a fixed test alert to verify the delivery path."""

        self._activity_log.append("Manual test triggered")
        try:
            self._deliver(self._build_test_notification())
        except Exception as exc:
            detail = _describe(exc)
            self._activity_log.append(f"Test failed: {detail}")
            return ProcessingResult.failed(TEST_EVENT_TYPE, detail)

        self._activity_log.append(f"Test notification sent to {self.recipient}")
        return ProcessingResult.processed(TEST_EVENT_TYPE)

    def _deliver(self, content: NotificationContent) -> None:
        self._notifier.send(content.subject, content.body)

    def _record_failure(self, event_type: str, exc: Exception) -> ProcessingResult:
        detail = _describe(exc)
        self._activity_log.append(
            f"Failed to send notification for {event_type}: {detail}"
        )
        return ProcessingResult.failed(event_type, detail)

    def _build_test_notification(self) -> NotificationContent:
        body = "".join(
            (
                "<h2>✅ Test Notification</h2>",
                f"<p>This is a test notification from your {SERVICE_NAME}.</p>",
                "<p><strong>Service:</strong> Running properly</p>",
                f"<p><strong>Monitoring:</strong> {', '.join(MONITORED_EVENT_TYPES)}</p>",
                f"<p><strong>Email:</strong> {self.recipient}</p>",
                f"<p><strong>Time:</strong> {format_local_datetime(now_in_app_timezone())}</p>",
            )
        )
        return NotificationContent(subject=f"🧪 Test: {SERVICE_NAME}", body=body)


def _describe(exc: Exception) -> str:
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str) and detail:
        return detail
    return str(exc) or exc.__class__.__name__


__all__ = ["EventPipeline", "SERVICE_NAME", "TEST_EVENT_TYPE"]
