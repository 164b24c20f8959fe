from fastapi import FastAPI

from .activity import router as activity_router
from .service import router as service_router
from .webhooks import router as webhooks_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(service_router)
    app.include_router(activity_router)
    app.include_router(webhooks_router)
