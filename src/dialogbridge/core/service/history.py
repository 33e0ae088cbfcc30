"""Rebuild the chat transcript from the platform's active contexts.

The platform may hand over several contexts per turn, including ones
that belong to other integrations. Each is scanned for the two
turn-threading keys and everything else is ignored, so an unrelated
context simply contributes nothing.
"""

from collections.abc import Iterable

from .models import (
    ROLE_ASSISTANT,
    ROLE_USER,
    ChatMessage,
    ContextEntry,
)


def reconstruct_history(contexts: Iterable[ContextEntry] | None) -> list[ChatMessage]:
    """Return the prior turns carried by *contexts*, oldest first.

    Per entry the assistant reply is emitted before the user query it
    stores. Entries carrying only one of the keys emit only that one.
    """
    history: list[ChatMessage] = []
    for context in contexts or ():
        params = context.parameters
        if params.last_ai_response is not None:
            history.append(
                ChatMessage(role=ROLE_ASSISTANT, content=params.last_ai_response)
            )
        if params.last_user_query is not None:
            history.append(ChatMessage(role=ROLE_USER, content=params.last_user_query))
    return history
