"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

logger = logging.getLogger(__name__)

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_MAX_OFFSET: Final[timedelta] = timedelta(hours=24)
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)
# Mirrors the en-US ``toLocaleString`` layout, e.g. ``11/14/2023, 10:13:20 PM``.
_LOCALE_FORMAT: Final[str] = "%m/%d/%Y, %I:%M:%S %p"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable (via
    the ``Settings`` model). If the provided value cannot be resolved, UTC is
    used as a fallback.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return resolve_timezone(tz_name)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO 8601 string."""

    return datetime.now(tz=timezone.utc).isoformat()


def format_local_datetime(value: datetime) -> str:
    """Render ``value`` in the human readable layout used by alert emails."""

    return value.strftime(_LOCALE_FORMAT)


def format_unix_timestamp(seconds: int | float, tz: tzinfo | None = None) -> str:
    """Convert unix ``seconds`` to a localized, human readable timestamp."""

    moment = datetime.fromtimestamp(seconds, tz=tz or get_app_timezone())
    return format_local_datetime(moment)


def resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            if offset < _MAX_OFFSET:
                return timezone(sign * offset)
        logger.warning(
            "Unknown timezone %r; falling back to %s", tz_name, _DEFAULT_TIMEZONE
        )
    return ZoneInfo(_DEFAULT_TIMEZONE)
