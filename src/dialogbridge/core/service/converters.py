"""ChatMessage <-> LangChain message converters, kept in one place."""

from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    SystemMessage,
)

from .errors import CapabilityError
from .models import ROLE_ASSISTANT, ROLE_SYSTEM, ROLE_USER, ChatMessage

_MESSAGE_CLASSES: dict[str, type[BaseMessage]] = {
    ROLE_SYSTEM: SystemMessage,
    ROLE_USER: HumanMessage,
    ROLE_ASSISTANT: AIMessage,
}

# Content block type carrying plain text in multi-part responses.
_TEXT_BLOCK = "text"


def to_langchain_messages(messages: list[ChatMessage]) -> list[BaseMessage]:
    return [_MESSAGE_CLASSES[m.role](content=m.content) for m in messages]


def reply_text(message: BaseMessage) -> str:
    """Extract the generated text from a model response.

    Raises ``CapabilityError`` when the response carries no text.
    """
    content = message.content
    if isinstance(content, str):
        text = content
    elif isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == _TEXT_BLOCK:
                parts.append(str(block.get(_TEXT_BLOCK, "")))
        text = "".join(parts)
    else:
        raise CapabilityError(
            f"Unexpected response content type: {type(content).__name__}"
        )

    if not text.strip():
        raise CapabilityError("Model returned no content")
    return text
