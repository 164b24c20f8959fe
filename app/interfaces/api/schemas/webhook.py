"""Pydantic schemas for the webhook and test endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookEventPayload(BaseModel):
    """Event body posted by Stripe. Only ``type`` and ``data`` are read."""

    type: str = Field(..., min_length=1, description="Stripe event type")
    data: dict[str, Any] = Field(
        default_factory=dict, description="Event payload, usually ``{'object': {...}}``"
    )

    model_config = ConfigDict(extra="allow")


class WebhookAck(BaseModel):
    received: bool = True
    processed: bool = True


class ManualTestResponse(BaseModel):
    success: bool
    message: str
    email: str


__all__ = ["WebhookEventPayload", "WebhookAck", "ManualTestResponse"]
