"""Service description and health endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request

from app.application.use_cases.notifications import SERVICE_NAME
from app.config import Settings, get_settings
from app.domain.entities import MONITORED_EVENT_TYPES
from app.infrastructure.activity_log import ActivityLog
from app.interfaces.api.dependencies import get_activity_log
from app.interfaces.api.schemas import HealthRead, ServiceInfoRead
from app.utils import utc_now_iso

router = APIRouter(tags=["service"])

ENDPOINTS = {
    "GET /": "Service info",
    "GET /health": "Health check",
    "GET /logs": "View recent activity logs",
    "POST /webhook": "Stripe webhook endpoint",
    "POST /test": "Test notification",
}


@router.get("/", response_model=ServiceInfoRead)
def read_service_info(settings: Settings = Depends(get_settings)) -> ServiceInfoRead:
    return ServiceInfoRead(
        service=SERVICE_NAME,
        status="running",
        endpoints=ENDPOINTS,
        monitoring=list(MONITORED_EVENT_TYPES),
        notification_email=settings.notification_email,
    )


@router.get("/health", response_model=HealthRead)
def read_health(
    request: Request, log: ActivityLog = Depends(get_activity_log)
) -> HealthRead:
    started_at = getattr(request.app.state, "started_at", None)
    uptime = time.monotonic() - started_at if started_at is not None else 0.0
    return HealthRead(
        status="healthy",
        timestamp=utc_now_iso(),
        uptime=uptime,
        logs_count=log.size(),
    )


__all__ = ["router"]
