"""
Entities - the message records that make up a conversation history.

A conversation is an ordered list of these; a message has no identity
beyond its position in that list.
"""

from .message import (
    MESSAGE_CLASSES,
    AssistantMessage,
    Media,
    Message,
    MessageType,
    SystemMessage,
    ToolCall,
    ToolResponse,
    ToolResponseMessage,
    UserMessage,
)

__all__ = [
    "MESSAGE_CLASSES",
    "AssistantMessage",
    "Media",
    "Message",
    "MessageType",
    "SystemMessage",
    "ToolCall",
    "ToolResponse",
    "ToolResponseMessage",
    "UserMessage",
]
