"""Message types stored in a conversation history."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MessageType(str, Enum):
    """Discriminator values for the message union."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


class Media(BaseModel):
    """Attachment carried by a user message (image, document, ...)."""

    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: str
    name: str | None = None


class ToolCall(BaseModel):
    """A tool invocation requested by the assistant."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "function"
    name: str
    arguments: str = ""


class ToolResponse(BaseModel):
    """The result returned for a single tool call."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    response_data: str = ""


class _BaseMessage(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def role(self) -> MessageType:
        return MessageType(self.message_type)

    def __repr__(self) -> str:
        text_preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return f"{type(self).__name__}(text={text_preview!r})"


class UserMessage(_BaseMessage):
    message_type: Literal["user"] = "user"
    media: list[Media] = Field(default_factory=list)


class AssistantMessage(_BaseMessage):
    message_type: Literal["assistant"] = "assistant"
    tool_calls: list[ToolCall] = Field(default_factory=list)

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


class SystemMessage(_BaseMessage):
    message_type: Literal["system"] = "system"


class ToolResponseMessage(_BaseMessage):
    message_type: Literal["tool"] = "tool"
    responses: list[ToolResponse] = Field(default_factory=list)


Message = Annotated[
    Union[UserMessage, AssistantMessage, SystemMessage, ToolResponseMessage],
    Field(discriminator="message_type"),
]

MESSAGE_CLASSES = (UserMessage, AssistantMessage, SystemMessage, ToolResponseMessage)
