"""Completion orchestrator: one webhook turn from request to reply.

Builds the transcript ``[system, *history, user]``, makes a single
completion call and shapes the platform reply. Failures never escape
``fulfill``: they are logged and turned into the configured fallback
text. Fallback replies carry no output context, so the platform keeps
whatever context it already holds and the next turn still sees the last
successful exchange.
"""

import logging

from langchain_core.language_models import BaseChatModel

from dialogbridge.configs.config import AppConfig
from dialogbridge.infra.logging import get_transcript_logger

from .converters import reply_text, to_langchain_messages
from .errors import CapabilityError, WebhookError
from .history import reconstruct_history
from .metrics import (
    FULFILLMENTS_TOTAL,
    HISTORY_MESSAGES,
    OUTCOME_OK,
    observe_completion,
)
from .models import (
    ROLE_SYSTEM,
    ROLE_USER,
    ChatMessage,
    OutboundContext,
    WebhookRequest,
    WebhookResponse,
)

logger = logging.getLogger(__name__)
transcript_logger = get_transcript_logger()


class CompletionOrchestrator:
    """Turns a ``WebhookRequest`` into a ``WebhookResponse``.

    The completion capability is injected at construction time; the
    orchestrator holds no per-request state, so one instance may serve
    concurrent requests.
    """

    def __init__(self, llm: BaseChatModel, config: AppConfig) -> None:
        self._llm = llm
        self._webhook = config.webhook
        self._system_directive = ChatMessage(
            role=ROLE_SYSTEM, content=config.prompt.system_prompt.strip()
        )

    @property
    def system_directive(self) -> ChatMessage:
        return self._system_directive

    # ------------------------------------------------------------------
    # Transcript
    # ------------------------------------------------------------------

    def assemble_messages(
        self, history: list[ChatMessage], query_text: str
    ) -> list[ChatMessage]:
        return [
            self._system_directive,
            *history,
            ChatMessage(role=ROLE_USER, content=query_text),
        ]

    # ------------------------------------------------------------------
    # Completion capability
    # ------------------------------------------------------------------

    async def complete(self, messages: list[ChatMessage]) -> str:
        """Run one completion call and return the generated text.

        Raises:
            CapabilityError: the call failed or produced no text.
        """
        try:
            with observe_completion():
                response = await self._llm.ainvoke(to_langchain_messages(messages))
                return reply_text(response)
        except CapabilityError:
            raise
        except Exception as exc:
            raise CapabilityError(f"Completion call failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Reply shaping
    # ------------------------------------------------------------------

    def build_reply(
        self, session: str, query_text: str, reply: str
    ) -> WebhookResponse:
        context = OutboundContext.for_turn(
            session=session,
            context_id=self._webhook.context_suffix,
            lifespan=self._webhook.context_lifespan,
            reply=reply,
            query_text=query_text,
        )
        return WebhookResponse.from_text(reply, contexts=[context])

    def build_fallback(self) -> WebhookResponse:
        return WebhookResponse.from_text(self._webhook.fallback_message)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    async def fulfill(self, request: WebhookRequest) -> WebhookResponse:
        """Handle one turn. Never raises; failures yield the fallback reply."""
        session = request.session
        try:
            query_text = request.query_result.query_text
            history = reconstruct_history(request.query_result.output_contexts)
            HISTORY_MESSAGES.observe(len(history))

            messages = self.assemble_messages(history, query_text)
            if transcript_logger.isEnabledFor(logging.DEBUG):
                transcript_logger.debug(
                    "Sending %d messages for session %s: %s",
                    len(messages),
                    session,
                    [m.model_dump() for m in messages],
                )

            reply = await self.complete(messages)
            response = self.build_reply(session, query_text, reply)
        except CapabilityError as exc:
            logger.warning(
                "Completion failed for session %s, sending fallback: %s",
                session,
                exc,
                exc_info=exc.__cause__ is not None,
            )
            FULFILLMENTS_TOTAL.labels(outcome=exc.outcome).inc()
            return self.build_fallback()
        except Exception:
            logger.exception(
                "Unexpected error fulfilling session %s, sending fallback", session
            )
            FULFILLMENTS_TOTAL.labels(outcome=WebhookError.outcome).inc()
            return self.build_fallback()

        FULFILLMENTS_TOTAL.labels(outcome=OUTCOME_OK).inc()
        logger.info(
            "Fulfilled session %s (%d prior messages)", session, len(history)
        )
        return response
