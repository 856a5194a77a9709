"""
chatmemory - conversation histories stored in Redis.

Quick Start:
    from chatmemory import RedisChatMemoryRepository, RedisMemoryConfig, UserMessage

    config = RedisMemoryConfig.from_env()
    with RedisChatMemoryRepository.from_config(config) as repo:
        repo.save_all("u1", [UserMessage(text="hi")])
        repo.find_messages("u1")

For a bounded memory on top of any repository, see MessageWindowChatMemory
and chatmemory.factory.
"""

__version__ = "1.0.0"

from .domain import (
    AssistantMessage,
    ChatMemoryError,
    ConfigurationError,
    ConversationId,
    InvalidArgument,
    Message,
    MessageType,
    SerializationError,
    StoreClosedError,
    StoreCommunicationError,
    SystemMessage,
    ToolResponseMessage,
    UserMessage,
)
from .domain.entities import Media, ToolCall, ToolResponse
from .application import ChatMemoryRepository, MessageSerializer, MessageWindowChatMemory
from .adapters.outbound.persistence import (
    InMemoryChatMemoryRepository,
    RedisChatMemoryRepository,
)
from .adapters.outbound.serialization import JsonMessageSerializer
from .infrastructure import RedisMemoryConfig, setup_logging
from .factory import create_chat_memory, create_chat_memory_repository

__all__ = [
    "__version__",
    # Messages
    "AssistantMessage",
    "Media",
    "Message",
    "MessageType",
    "SystemMessage",
    "ToolCall",
    "ToolResponse",
    "ToolResponseMessage",
    "UserMessage",
    "ConversationId",
    # Ports and services
    "ChatMemoryRepository",
    "MessageSerializer",
    "MessageWindowChatMemory",
    # Adapters
    "InMemoryChatMemoryRepository",
    "RedisChatMemoryRepository",
    "JsonMessageSerializer",
    # Configuration
    "RedisMemoryConfig",
    "setup_logging",
    "create_chat_memory",
    "create_chat_memory_repository",
    # Errors
    "ChatMemoryError",
    "ConfigurationError",
    "InvalidArgument",
    "SerializationError",
    "StoreClosedError",
    "StoreCommunicationError",
]
