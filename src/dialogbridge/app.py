"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from dialogbridge.api.exceptions import register_exception_handlers
from dialogbridge.api.health import router as health_router
from dialogbridge.api.webhook import router as webhook_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    logger.info("Starting dialogbridge webhook")
    yield
    logger.info("Shutting down dialogbridge webhook")


def get_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="dialogbridge",
        description="Dialogue platform fulfillment webhook backed by a chat model",
        version="0.1.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(webhook_router)
    app.include_router(health_router)
    app.mount("/metrics", make_asgi_app())

    return app


app = get_app()
