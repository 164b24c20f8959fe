"""Shared fixtures for the test-suite."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("NOTIFICATION_EMAIL", "alerts@example.com")
os.environ.setdefault("APP_TIMEZONE", "UTC")
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from app.config import reset_settings_cache  # noqa: E402
from app.domain.exceptions import DeliveryError  # noqa: E402
from app.utils.datetime import get_app_timezone  # noqa: E402


class RecordingNotifier:
    """Notifier double that records every message and can be told to fail."""

    def __init__(self, recipient: str = "alerts@example.com", error: str | None = None):
        self.recipient = recipient
        self.error = error
        self.sent: list[tuple[str, str]] = []

    def send(self, subject: str, body: str) -> None:
        if self.error is not None:
            raise DeliveryError(self.error)
        self.sent.append((subject, body))


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    get_app_timezone.cache_clear()
    yield
    reset_settings_cache()
    get_app_timezone.cache_clear()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(error="quota exceeded")
