"""Unit tests for transcript reconstruction from platform contexts."""

import pytest

from dialogbridge.core.service.history import reconstruct_history
from dialogbridge.core.service.models import (
    ROLE_ASSISTANT,
    ROLE_USER,
    ChatMessage,
    ContextEntry,
)


def _ctx(**parameters) -> ContextEntry:
    return ContextEntry.model_validate(
        {"name": "s/contexts/x", "lifespanCount": 3, "parameters": parameters}
    )


class TestEmptyInput:
    def test_none_yields_empty_history(self):
        assert reconstruct_history(None) == []

    def test_empty_list_yields_empty_history(self):
        assert reconstruct_history([]) == []

    @pytest.mark.parametrize(
        "parameters",
        [
            {},
            {"foo": "bar"},
            {"no-input": 0, "no-match": 1, "lastAIResponse.original": "x"},
        ],
    )
    def test_contexts_without_known_keys_contribute_nothing(self, parameters):
        contexts = [_ctx(**parameters), _ctx(**parameters)]
        assert reconstruct_history(contexts) == []

    def test_context_without_parameters(self):
        entry = ContextEntry.model_validate({"name": "s/contexts/welcome"})
        assert reconstruct_history([entry]) == []


class TestReconstruction:
    def test_single_ai_response(self):
        history = reconstruct_history([_ctx(lastAIResponse="A")])
        assert history == [ChatMessage(role=ROLE_ASSISTANT, content="A")]

    def test_single_user_query(self):
        history = reconstruct_history([_ctx(lastUserQuery="Q")])
        assert history == [ChatMessage(role=ROLE_USER, content="Q")]

    def test_assistant_emitted_before_user_within_entry(self):
        history = reconstruct_history([_ctx(lastUserQuery="Q", lastAIResponse="A")])
        assert [m.role for m in history] == [ROLE_ASSISTANT, ROLE_USER]
        assert [m.content for m in history] == ["A", "Q"]

    def test_partial_and_full_entries_keep_platform_order(self):
        contexts = [
            _ctx(lastAIResponse="Welcome to the bank."),
            _ctx(lastAIResponse="Rates start at 12%.", lastUserQuery="Loan rates?"),
        ]
        history = reconstruct_history(contexts)
        assert history == [
            ChatMessage(role=ROLE_ASSISTANT, content="Welcome to the bank."),
            ChatMessage(role=ROLE_ASSISTANT, content="Rates start at 12%."),
            ChatMessage(role=ROLE_USER, content="Loan rates?"),
        ]

    def test_unrelated_contexts_are_skipped(self):
        contexts = [
            _ctx(**{"given-name": "Thandi"}),
            _ctx(lastAIResponse="A", lastUserQuery="Q", extra={"nested": True}),
            _ctx(),
        ]
        assert len(reconstruct_history(contexts)) == 2

    def test_blank_values_are_treated_as_absent(self):
        history = reconstruct_history([_ctx(lastAIResponse="", lastUserQuery="Q")])
        assert history == [ChatMessage(role=ROLE_USER, content="Q")]

    def test_non_string_values_are_coerced(self):
        history = reconstruct_history([_ctx(lastAIResponse=42)])
        assert history == [ChatMessage(role=ROLE_ASSISTANT, content="42")]

    def test_returns_new_list_each_call(self):
        contexts = [_ctx(lastAIResponse="A")]
        first = reconstruct_history(contexts)
        first.append(ChatMessage(role=ROLE_USER, content="mutated"))
        assert reconstruct_history(contexts) == [
            ChatMessage(role=ROLE_ASSISTANT, content="A")
        ]
