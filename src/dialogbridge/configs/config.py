"""Configuration management using pydantic-settings.

**Not a singleton**: each call to ``get_app_config()`` re-reads config
from disk so that edits to the YAML files are picked up without restarting.

Priority order (highest first):

1. Environment variables (``DIALOGBRIDGE_`` prefix, ``__`` for nesting)
2. ``.env`` dotenv file
3. Static YAML (``configs/config.yaml``)
4. Prompt YAML (``configs/prompt.yml``, ``system_prompt`` key only)
5. Init defaults / field defaults
6. File secrets
"""

import logging
from pathlib import Path
from typing import Annotated, Any

import yaml
from fastapi import Depends
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .system import (
    LLMConfig,
    LoggingConfig,
    PromptConfig,
    ServerConfig,
    WebhookConfig,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Path constants
# ---------------------------------------------------------------------------

CONFIG_PY_PATH = Path(__file__).resolve()
PROJECT_ROOT = CONFIG_PY_PATH.parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "configs"

STATIC_CONFIG_FILE = CONFIG_DIR / "config.yaml"
PROMPT_CONFIG_FILE = CONFIG_DIR / "prompt.yml"

DOTENV_FILE_PATH = PROJECT_ROOT / ".env"
ENV_DELIMITER = "__"
ENV_PREFIX = "DIALOGBRIDGE_"

DEFAULT_ENCODING = "utf-8"


class AppConfig(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_file=DOTENV_FILE_PATH,
        env_file_encoding=DEFAULT_ENCODING,
        env_nested_delimiter=ENV_DELIMITER,
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        yaml_file=STATIC_CONFIG_FILE,
        yaml_file_encoding=DEFAULT_ENCODING,
    )

    llm: LLMConfig = Field(
        default_factory=LLMConfig,
        description="Chat completion client settings",
    )

    webhook: WebhookConfig = Field(
        default_factory=WebhookConfig,
        description="Fulfillment webhook settings",
    )

    prompt: PromptConfig = Field(
        default_factory=PromptConfig,
        description="System prompt configuration",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings",
    )

    server: ServerConfig = Field(
        default_factory=ServerConfig,
        description="HTTP server bind settings",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            _PromptYamlSettingsSource(settings_cls),
            init_settings,
            file_secret_settings,
        )


class _PromptYamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads the prompt.yml file."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        # Everything is returned at once from __call__.
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        if not PROMPT_CONFIG_FILE.exists():
            return {}

        try:
            with open(PROMPT_CONFIG_FILE, encoding=DEFAULT_ENCODING) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning(
                "Ignoring unreadable prompt file %s", PROMPT_CONFIG_FILE, exc_info=True
            )
            return {}

        if isinstance(data, dict) and data.get("system_prompt"):
            return {"prompt": {"system_prompt": data["system_prompt"]}}
        return {}


def get_app_config() -> AppConfig:
    """Get the application configuration.

    Re-reads ``configs/config.yaml`` and ``configs/prompt.yml`` on every
    call so that edited values are picked up immediately.
    """
    return AppConfig()


def get_llm_config(
    config: Annotated[AppConfig, Depends(get_app_config)],
) -> LLMConfig:
    return config.llm
