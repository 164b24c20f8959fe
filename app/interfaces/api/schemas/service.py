"""Pydantic schemas describing the service itself."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ServiceInfoRead(BaseModel):
    service: str
    status: str
    endpoints: dict[str, str]
    monitoring: list[str]
    notification_email: str


class HealthRead(BaseModel):
    status: str = Field(..., description="Always ``healthy`` while the process serves requests")
    timestamp: str
    uptime: float = Field(..., ge=0, description="Seconds since the application started")
    logs_count: int = Field(..., ge=0)


__all__ = ["ServiceInfoRead", "HealthRead"]
