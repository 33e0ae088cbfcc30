"""Chat transcript message."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """A single message in the transcript sent to the model."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Message sender role")
    content: str = Field(description="Message content")
