"""Shared fixtures: configuration and stand-in chat models."""

from typing import Any

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

from dialogbridge.configs.config import AppConfig


class RecordingChatModel(BaseChatModel):
    """Returns a fixed reply and records every transcript it receives."""

    reply: Any = "ok"
    calls: list[list[BaseMessage]] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "recording"

    def _generate(self, messages, stop=None, run_manager=None, **kwargs):
        self.calls.append(list(messages))
        return ChatResult(
            generations=[ChatGeneration(message=AIMessage(content=self.reply))]
        )


class FailingChatModel(BaseChatModel):
    """Raises on every call, like an unreachable completion API."""

    error_message: str = "upstream unavailable: secret-detail-123"
    calls: int = 0

    @property
    def _llm_type(self) -> str:
        return "failing"

    def _generate(self, messages, stop=None, run_manager=None, **kwargs):
        self.calls += 1
        raise ConnectionError(self.error_message)


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture()
def fallback_message(config: AppConfig) -> str:
    return config.webhook.fallback_message


@pytest.fixture()
def recording_llm() -> RecordingChatModel:
    return RecordingChatModel(reply="Please contact a branch.")


@pytest.fixture()
def failing_llm() -> FailingChatModel:
    return FailingChatModel()


@pytest.fixture()
def make_recording_llm():
    def factory(reply: Any) -> RecordingChatModel:
        return RecordingChatModel(reply=reply)

    return factory


@pytest.fixture()
def make_list_llm():
    def factory(*responses: str) -> FakeListChatModel:
        return FakeListChatModel(responses=list(responses))

    return factory
