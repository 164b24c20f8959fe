"""FastAPI dependency utilities."""

from fastapi import Depends

from app.application.use_cases.notifications import EventPipeline
from app.config import Settings, get_settings
from app.domain.notifier import Notifier
from app.infrastructure.activity_log import ActivityLog, activity_log
from app.infrastructure.email import SendGridNotifier


def get_activity_log() -> ActivityLog:
    """Return the process wide activity log."""

    return activity_log


def get_notifier(settings: Settings = Depends(get_settings)) -> Notifier:
    """Return the notifier configured for the current settings."""

    return SendGridNotifier.from_settings(settings)


def get_event_pipeline(
    log: ActivityLog = Depends(get_activity_log),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> EventPipeline:
    """Return a pipeline bound to the shared activity log."""

    return EventPipeline(log, notifier, dashboard_url=settings.stripe_dashboard_url)
