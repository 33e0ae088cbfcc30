"""Chat model factory."""

from typing import Annotated

from fastapi import Depends
from langchain_openai import ChatOpenAI

from dialogbridge.configs.config import get_llm_config
from dialogbridge.configs.system import LLMConfig


def get_llm(
    config: Annotated[LLMConfig, Depends(get_llm_config)],
) -> ChatOpenAI:
    """Create a ChatOpenAI client with the fixed generation parameters.

    Retries are disabled: a turn makes exactly one completion attempt and
    relies on the fallback reply when it fails.
    """
    return ChatOpenAI(
        base_url=config.endpoint,
        api_key=config.api_key,
        model=config.model_name,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        timeout=config.model_timeout.total_seconds(),
        max_retries=config.max_retries,
    )
