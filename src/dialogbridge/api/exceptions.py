"""Global exception handlers.

The platform renders its own generic failure text for any non-2xx
webhook answer, so every error on the webhook route is answered with the
configured fallback reply and status 200. Details go to the log only.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import RequestResponseEndpoint

from dialogbridge.configs.config import get_app_config
from dialogbridge.configs.system import DEFAULT_FALLBACK_MESSAGE
from dialogbridge.core.service.errors import MalformedInputError, WebhookError
from dialogbridge.core.service.metrics import FULFILLMENTS_TOTAL
from dialogbridge.core.service.models import WebhookResponse

from .webhook import WEBHOOK_PATH

logger = logging.getLogger(__name__)


def _fallback_message() -> str:
    try:
        return get_app_config().webhook.fallback_message
    except Exception:
        logger.exception("Could not load configuration, using default fallback")
        return DEFAULT_FALLBACK_MESSAGE


def fallback_response() -> JSONResponse:
    message = _fallback_message()
    return JSONResponse(
        status_code=200,
        content=WebhookResponse.from_text(message).to_payload(),
    )


async def handle_webhook_error(request: Request, exc: WebhookError) -> JSONResponse:
    FULFILLMENTS_TOTAL.labels(outcome=exc.outcome).inc()
    return fallback_response()


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> Response:
    if request.url.path != WEBHOOK_PATH:
        return await request_validation_exception_handler(request, exc)

    error = MalformedInputError("Malformed webhook payload", errors=list(exc.errors()))
    logger.warning(
        "%s: %s", error, [(e.get("loc"), e.get("msg")) for e in error.errors]
    )
    return await handle_webhook_error(request, error)


async def fallback_on_unhandled_error(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Last-resort catch for errors escaping the webhook route.

    Covers failures outside the orchestrator, e.g. while building the
    chat model dependency.
    """
    if request.url.path != WEBHOOK_PATH:
        return await call_next(request)
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s, sending fallback", WEBHOOK_PATH)
        FULFILLMENTS_TOTAL.labels(outcome=WebhookError.outcome).inc()
        return fallback_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers and the fallback middleware on ``app``."""
    app.add_exception_handler(WebhookError, handle_webhook_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, handle_request_validation_error  # type: ignore[arg-type]
    )
    app.middleware("http")(fallback_on_unhandled_error)
