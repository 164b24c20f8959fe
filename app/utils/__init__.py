"""Utility helpers for reusable functionality."""

from .datetime import (
    format_local_datetime,
    format_unix_timestamp,
    get_app_timezone,
    now_in_app_timezone,
    resolve_timezone,
    utc_now_iso,
)

__all__ = [
    "format_local_datetime",
    "format_unix_timestamp",
    "get_app_timezone",
    "now_in_app_timezone",
    "resolve_timezone",
    "utc_now_iso",
]
