"""Tests for the timezone helpers."""

from __future__ import annotations

from datetime import timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from app.utils.datetime import resolve_timezone


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("UTC+05:30", timezone(timedelta(hours=5, minutes=30))),
        ("UTC-03:00", timezone(-timedelta(hours=3))),
        ("UTC+23:59", timezone(timedelta(hours=23, minutes=59))),
    ],
)
def test_resolve_offset_timezones(name: str, expected) -> None:
    assert resolve_timezone(name) == expected


@pytest.mark.parametrize("name", ["UTC+25", "UTC-24:00", "Mars/Olympus_Mons"])
def test_unresolvable_timezones_fall_back_to_utc(name: str, caplog) -> None:
    with caplog.at_level("WARNING"):
        assert resolve_timezone(name) == ZoneInfo("UTC")

    assert "falling back to UTC" in caplog.text


def test_resolve_named_timezone() -> None:
    assert resolve_timezone("America/Bogota") == ZoneInfo("America/Bogota")
