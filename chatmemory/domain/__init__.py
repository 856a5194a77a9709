"""
Domain Layer - Pure Business Logic.

This layer contains:
    - Entities: The closed set of message types (user, assistant, system, tool)
    - Value Objects: Immutable objects without identity (ConversationId)
    - Exceptions: Domain-specific error types

The domain layer knows nothing about Redis or any other storage backend.
"""

from .entities import (
    AssistantMessage,
    Message,
    MessageType,
    SystemMessage,
    ToolResponseMessage,
    UserMessage,
)
from .value_objects import ConversationId
from .exceptions import (
    ChatMemoryError,
    ConfigurationError,
    InvalidArgument,
    SerializationError,
    StoreClosedError,
    StoreCommunicationError,
)

__all__ = [
    # Entities
    "AssistantMessage",
    "Message",
    "MessageType",
    "SystemMessage",
    "ToolResponseMessage",
    "UserMessage",
    # Value Objects
    "ConversationId",
    # Exceptions
    "ChatMemoryError",
    "ConfigurationError",
    "InvalidArgument",
    "SerializationError",
    "StoreClosedError",
    "StoreCommunicationError",
]
