"""Base64 Service — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to an {"error": str} body
    - Only /encode and /decode are served (docs and OpenAPI routes disabled)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - run() reads host/port from settings so PORT alone controls the listener
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from base64_service.api.error_handlers import register_error_handlers
from base64_service.api.routes import codec
from base64_service.infrastructure.observability import setup_logging
from base64_service.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Server running on port {settings.port}",
        extra={"port": settings.port},
    )
    yield
    logger.info("Server shutting down")


app = FastAPI(
    title="Base64 Service", version="1.0.0", lifespan=lifespan,
    docs_url=None, redoc_url=None, openapi_url=None,
)

app.include_router(codec.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        app, host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )
