"""Aggregate application use cases."""

from .notifications import EventPipeline, render_notification

__all__ = [
    "EventPipeline",
    "render_notification",
]
