"""Fulfillment webhook endpoint."""

from fastapi import APIRouter

from dialogbridge.core.service.models import WebhookRequest, WebhookResponse

from .deps import OrchestratorDep

WEBHOOK_PATH = "/dialogflow-webhook"

router = APIRouter(tags=["webhook"])


@router.post(
    WEBHOOK_PATH,
    response_model=WebhookResponse,
    response_model_exclude_none=True,
)
async def dialogflow_webhook(
    webhook_request: WebhookRequest,
    orchestrator: OrchestratorDep,
) -> WebhookResponse:
    """
    Answer one dialogue turn.

    Prior turns are rebuilt from ``queryResult.outputContexts``; the reply
    carries a refreshed ``<session>/contexts/session-vars`` context that the
    platform echoes back on the next turn. Always answers 200: failures are
    reported to the user as a fixed fallback text.
    """
    return await orchestrator.fulfill(webhook_request)
