"""Pydantic schemas for the activity log endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LogEntryRead(BaseModel):
    timestamp: str = Field(..., description="ISO 8601 moment the entry was recorded")
    message: str = Field(..., description="Description of the recorded action")

    model_config = ConfigDict(from_attributes=True)


class ActivityLogRead(BaseModel):
    logs: list[LogEntryRead] = Field(
        default_factory=list, description="Most recent entries, oldest first"
    )
    total_logs: int = Field(..., ge=0, description="Entries currently retained")


__all__ = ["LogEntryRead", "ActivityLogRead"]
