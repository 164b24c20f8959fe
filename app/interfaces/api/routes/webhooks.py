"""Stripe webhook receiver and manual test trigger."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.notifications import EventPipeline
from app.domain.entities import BillingEvent
from app.interfaces.api.dependencies import get_event_pipeline
from app.interfaces.api.schemas import ManualTestResponse, WebhookAck, WebhookEventPayload

router = APIRouter(tags=["webhooks"])


@router.post("/webhook", response_model=WebhookAck)
def receive_webhook(
    payload: WebhookEventPayload,
    pipeline: EventPipeline = Depends(get_event_pipeline),
) -> WebhookAck:
    """Run a Stripe event through the notification pipeline."""

    result = pipeline.handle(BillingEvent(type=payload.type, data=payload.data))
    if result.is_failure:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send notification",
        )
    return WebhookAck(received=True, processed=True)


@router.post("/test", response_model=ManualTestResponse)
def trigger_test_notification(
    pipeline: EventPipeline = Depends(get_event_pipeline),
) -> ManualTestResponse:
    """Send a test alert to the configured recipient."""

    result = pipeline.trigger_test()
    if result.is_failure:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.error,
        )
    return ManualTestResponse(
        success=True,
        message="Test notification sent successfully",
        email=pipeline.recipient,
    )


__all__ = ["router"]
