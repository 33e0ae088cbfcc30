"""Fulfillment webhook payloads exchanged with the dialogue platform.

Field names on the wire are camelCase; the models expose snake_case
attributes and accept either spelling on input. Unknown keys are
ignored so that platform-side additions never break parsing.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .constants import (
    CONTEXTS_PATH_SEGMENT,
    PARAM_LAST_AI_RESPONSE,
    PARAM_LAST_USER_QUERY,
)


class _PlatformModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Inbound
# ---------------------------------------------------------------------------


class ContextParameters(_PlatformModel):
    """Parameters of an active context.

    Only the two turn-threading keys are typed; everything else the
    platform stores in a context is ignored.
    """

    last_ai_response: str | None = Field(
        default=None,
        alias=PARAM_LAST_AI_RESPONSE,
        description="Assistant reply of an earlier turn",
    )
    last_user_query: str | None = Field(
        default=None,
        alias=PARAM_LAST_USER_QUERY,
        description="User utterance of an earlier turn",
    )

    @field_validator("last_ai_response", "last_user_query", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = value if isinstance(value, str) else str(value)
        return text or None


class ContextEntry(_PlatformModel):
    """One active context as echoed back by the platform.

    Only ``parameters`` feeds the conversation history. A context whose
    name or lifespan is missing or mistyped is still accepted, with the
    field reset to its default.
    """

    name: str = Field(default="", description="Full context resource name")
    lifespan_count: int | None = Field(
        default=None, description="Remaining turns before the context expires"
    )
    parameters: ContextParameters = Field(
        default_factory=ContextParameters, description="Context parameters"
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("lifespan_count", mode="before")
    @classmethod
    def _lifespan_or_none(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return None

    @field_validator("parameters", mode="before")
    @classmethod
    def _parameters_or_empty(cls, value: Any) -> Any:
        if isinstance(value, (dict, ContextParameters)):
            return value
        return {}


class QueryResult(_PlatformModel):
    """Result of the platform's intent matching for the current turn."""

    query_text: str = Field(description="Raw user utterance of this turn")
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Extracted intent parameters"
    )
    output_contexts: list[ContextEntry] = Field(
        default_factory=list, description="Contexts active for this turn"
    )

    @field_validator("parameters", mode="before")
    @classmethod
    def _null_parameters(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("output_contexts", mode="before")
    @classmethod
    def _null_contexts(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            # Entries that are not objects carry no parameters to read.
            return [c for c in value if isinstance(c, (dict, ContextEntry))]
        return value


class WebhookRequest(_PlatformModel):
    """Inbound fulfillment request."""

    session: str = Field(description="Opaque session resource name")
    query_result: QueryResult = Field(description="Current turn")


# ---------------------------------------------------------------------------
# Outbound
# ---------------------------------------------------------------------------


class FulfillmentText(_PlatformModel):
    text: list[str] = Field(description="Text variants; the platform shows one")


class FulfillmentMessage(_PlatformModel):
    text: FulfillmentText


class OutboundParameters(_PlatformModel):
    """The exchange written back for the next turn to read.

    Both keys are always serialized, even when a value is empty.
    """

    last_ai_response: str = Field(alias=PARAM_LAST_AI_RESPONSE)
    last_user_query: str = Field(alias=PARAM_LAST_USER_QUERY)


class OutboundContext(_PlatformModel):
    """Context refreshed on every successful turn."""

    name: str = Field(description="'<session>/contexts/<id>'")
    lifespan_count: int = Field(description="Turns the context stays active")
    parameters: OutboundParameters = Field(description="Latest turn")

    @classmethod
    def for_turn(
        cls,
        session: str,
        context_id: str,
        lifespan: int,
        reply: str,
        query_text: str,
    ) -> "OutboundContext":
        return cls(
            name=f"{session}/{CONTEXTS_PATH_SEGMENT}/{context_id}",
            lifespan_count=lifespan,
            parameters=OutboundParameters(
                last_ai_response=reply, last_user_query=query_text
            ),
        )


class WebhookResponse(_PlatformModel):
    """Outbound fulfillment response.

    ``output_contexts`` is ``None`` on fallback replies and is left out of
    the serialized body in that case.
    """

    fulfillment_messages: list[FulfillmentMessage] = Field(
        description="Reply messages rendered by the platform"
    )
    output_contexts: list[OutboundContext] | None = Field(
        default=None, description="Contexts to set for the next turn"
    )

    @classmethod
    def from_text(
        cls, text: str, contexts: list[OutboundContext] | None = None
    ) -> "WebhookResponse":
        return cls(
            fulfillment_messages=[FulfillmentMessage(text=FulfillmentText(text=[text]))],
            output_contexts=contexts,
        )

    @property
    def reply_text(self) -> str:
        return self.fulfillment_messages[0].text.text[0]

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the platform's JSON shape."""
        return self.model_dump(by_alias=True, exclude_none=True)
