"""Application configuration (pydantic-settings)."""

from .config import AppConfig, get_app_config, get_llm_config  # noqa: F401
from .system import (  # noqa: F401
    LLMConfig,
    LoggingConfig,
    PromptConfig,
    ServerConfig,
    WebhookConfig,
)
