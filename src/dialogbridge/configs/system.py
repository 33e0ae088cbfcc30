from datetime import timedelta

from pydantic import BaseModel, Field

from .prompt import DEFAULT_SYSTEM_PROMPT

DEFAULT_FALLBACK_MESSAGE = (
    "Sorry, I'm experiencing technical difficulties. Please try again later."
)


class LLMConfig(BaseModel):
    """OpenAI-compatible chat completion client settings."""

    endpoint: str | None = Field(
        default=None,
        description="Base URL of the completion API; None uses the OpenAI default",
    )
    api_key: str | None = Field(
        default=None,
        description="API key; None falls back to the OPENAI_API_KEY env var",
    )
    model_name: str = Field(
        default="gpt-4o-mini", description="Model identifier sent to the API"
    )
    temperature: float = Field(
        default=0.5, description="Sampling temperature for model responses"
    )
    max_tokens: int = Field(
        default=300, description="Maximum tokens in a single response"
    )
    model_timeout: timedelta = Field(
        default=timedelta(seconds=30),
        description="Timeout for a single completion request",
    )
    max_retries: int = Field(
        default=0,
        description="Client-side retries; a turn makes a single attempt",
    )


class WebhookConfig(BaseModel):
    """Fulfillment webhook settings."""

    context_suffix: str = Field(
        default="session-vars",
        description="Context id appended to '<session>/contexts/'",
    )
    context_lifespan: int = Field(
        default=5, description="Lifespan (turns) of the refreshed context"
    )
    fallback_message: str = Field(
        default=DEFAULT_FALLBACK_MESSAGE,
        description="User-safe reply sent when the turn cannot be fulfilled",
    )


class PromptConfig(BaseModel):
    """System prompt configuration."""

    system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="Fixed system directive prepended to every transcript",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO", description="Root log level")
    json_output: bool = Field(
        default=True, description="Emit JSON lines instead of coloured text"
    )
    log_transcripts: bool = Field(
        default=False,
        description="Log the full message list of every turn, independent of level",
    )
    quiet_loggers: list[str] = Field(
        default_factory=lambda: ["httpx", "httpcore", "openai", "opentelemetry"],
        description="Client libraries capped at WARNING; they log request bodies",
    )


class ServerConfig(BaseModel):
    """Uvicorn bind settings."""

    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=3000, description="API server port")
