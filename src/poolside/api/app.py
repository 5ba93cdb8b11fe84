"""FastAPI application factory.

Usage:
    # Development
    fastapi dev src/poolside/api/app.py

    # Production
    fastapi run src/poolside/api/app.py
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from poolside import __version__, bind_context, clear_context, configure_logging, get_logger
from poolside.api.routes import (
    athletes_router,
    health_router,
    swim_times_router,
    training_logs_router,
)
from poolside.config import get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "app_starting",
        environment=settings.environment.value,
        supabase_url=settings.supabase_url,
        database_configured=settings.has_supabase_credentials,
    )
    yield
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Poolside API",
        description="Swim time entry and training logs for club coaches",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        bind_context(request_id=request_id, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_context()
        response.headers["x-request-id"] = request_id
        return response

    app.include_router(health_router)
    app.include_router(swim_times_router, prefix="/api/v1")
    app.include_router(training_logs_router, prefix="/api/v1")
    app.include_router(athletes_router, prefix="/api/v1")

    return app


# Application instance for uvicorn
app = create_app()
