"""API client posting platform-style fulfillment requests."""

import logging
from typing import Any

import httpx

from .config import CLIConfig

logger = logging.getLogger(__name__)


class WebhookClient:
    """Client for the dialogbridge fulfillment webhook."""

    def __init__(
        self, config: CLIConfig, transport: httpx.AsyncBaseTransport | None = None
    ):
        """Initialize the API client."""
        self.config = config
        self.client = httpx.AsyncClient(timeout=60.0, transport=transport)

    @staticmethod
    def build_payload(
        session: str, query: str, contexts: list[dict[str, Any]]
    ) -> dict[str, Any]:
        return {
            "session": session,
            "queryResult": {
                "queryText": query,
                "parameters": {},
                "outputContexts": contexts,
            },
        }

    async def send_turn(
        self, session: str, query: str, contexts: list[dict[str, Any]]
    ) -> dict[str, Any]:
        """Post one turn and return the decoded fulfillment response.

        Transport problems are reported in the same shape as a webhook
        reply, with no output contexts, so the caller handles one format.
        """
        url = self.config.webhook_url
        payload = self.build_payload(session, query, contexts)
        logger.debug("Posting turn to %s: %s", url, payload)

        try:
            response = await self.client.post(url, json=payload)
            logger.debug("Webhook answered HTTP %d", response.status_code)
            if response.status_code != 200:
                return _error_reply(f"HTTP {response.status_code}: {response.text}")
            return response.json()
        except httpx.TimeoutException:
            return _error_reply("Request timed out.")
        except httpx.ConnectError as e:
            return _error_reply(f"Connection error: {str(e)}")
        except ValueError as e:
            return _error_reply(f"Invalid JSON response: {str(e)}")

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()


def _error_reply(message: str) -> dict[str, Any]:
    return {"fulfillmentMessages": [{"text": {"text": [f"[error] {message}"]}}]}


def reply_texts(response: dict[str, Any]) -> list[str]:
    """Collect the text variants of every fulfillment message."""
    texts: list[str] = []
    for message in response.get("fulfillmentMessages") or []:
        texts.extend((message.get("text") or {}).get("text") or [])
    return texts
