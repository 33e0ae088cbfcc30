"""FastAPI dependency factory for the completion orchestrator."""

from typing import Annotated

from fastapi import Depends
from langchain_core.language_models import BaseChatModel

from dialogbridge.configs.config import AppConfig, get_app_config
from dialogbridge.core.llm import get_llm

from .orchestrator import CompletionOrchestrator


def get_orchestrator(
    llm: Annotated[BaseChatModel, Depends(get_llm)],
    config: Annotated[AppConfig, Depends(get_app_config)],
) -> CompletionOrchestrator:
    """Create a per-request orchestrator around the injected chat model."""
    return CompletionOrchestrator(llm, config)
