"""Endpoints exposing the recent activity log."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.infrastructure.activity_log import ActivityLog
from app.interfaces.api.dependencies import get_activity_log
from app.interfaces.api.schemas import ActivityLogRead, LogEntryRead

router = APIRouter(tags=["activity"])


@router.get("/logs", response_model=ActivityLogRead)
def read_logs(
    limit: int = Query(20, ge=1, le=100, description="Maximum number of entries to return"),
    log: ActivityLog = Depends(get_activity_log),
) -> ActivityLogRead:
    """Return the most recent activity entries, oldest first."""

    entries = log.recent(limit)
    return ActivityLogRead(
        logs=[LogEntryRead.model_validate(entry) for entry in entries],
        total_logs=log.size(),
    )


__all__ = ["router"]
