"""SendGrid backed notifier for payment failure alerts."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import Settings, get_settings
from app.domain.exceptions import DeliveryError

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        # Fall back to a JSON string for unrecognised payloads
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(status_code: Any, details: str | None, fallback: str) -> str:
    if status_code and details:
        return f"SendGrid API request failed with status {status_code}: {details}"
    if status_code:
        return f"SendGrid API request failed with status {status_code}"
    if details:
        return f"SendGrid API request failed: {details}"
    return fallback


class SendGridNotifier:
    """Deliver alerts to a single recipient through the SendGrid REST API."""

    def __init__(
        self,
        recipient: str,
        *,
        api_key: str | None,
        sender: str | None,
    ) -> None:
        self.recipient = recipient
        self._api_key = api_key
        self._sender = sender

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SendGridNotifier":
        settings = settings or get_settings()
        return cls(
            settings.notification_email,
            api_key=settings.sendgrid_api_key,
            sender=settings.sendgrid_sender,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key and self._sender)

    def send(self, subject: str, body: str) -> None:
        """Send ``body`` as HTML to the configured recipient.

        Raises :class:`DeliveryError` when the configuration is incomplete, the
        request fails or SendGrid answers with a non-2xx status.
        """

        if not self.is_configured:
            detail = "SendGrid configuration incomplete; email delivery is disabled"
            logger.error("Failed to send email: %s", detail)
            raise DeliveryError(detail)

        message = Mail(
            from_email=self._sender,
            to_emails=self.recipient,
            subject=subject,
            html_content=body,
        )

        try:
            client = SendGridAPIClient(self._api_key)
            response = client.send(message)
        except Exception as exc:
            detail = _describe_failure(
                getattr(exc, "status_code", None),
                _extract_sendgrid_error_details(getattr(exc, "body", None)),
                str(exc) or exc.__class__.__name__,
            )
            logger.error("Failed to send email: %s", detail)
            raise DeliveryError(detail) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            detail = _describe_failure(
                status_code,
                _extract_sendgrid_error_details(getattr(response, "body", None)),
                "SendGrid API returned an unexpected response",
            )
            logger.error("Failed to send email: %s", detail)
            raise DeliveryError(detail)

        logger.info("Email sent successfully to %s", self.recipient)


__all__ = ["SendGridNotifier"]
