import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.application.use_cases.notifications import SERVICE_NAME
from app.config import get_settings
from app.infrastructure.activity_log import activity_log
from app.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the startup time and announce it in the activity log."""

    app.state.started_at = time.monotonic()
    activity_log.append(f"{SERVICE_NAME} started")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=SERVICE_NAME, lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
