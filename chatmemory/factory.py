"""
Composition root for chatmemory.

Picks and builds the repository named by configuration. Applications call
these once at startup and own the result's lifetime (close() on shutdown).

Example:
    from chatmemory.factory import create_chat_memory

    memory = create_chat_memory()          # backend from CHAT_MEMORY_BACKEND
    memory.add("conv-1", UserMessage(text="hello"))
    ...
    memory.repository.close()
"""

import logging
from typing import Optional

import redis

from .adapters.outbound.persistence import (
    InMemoryChatMemoryRepository,
    RedisChatMemoryRepository,
)
from .application.ports import ChatMemoryRepository, MessageSerializer
from .application.services import MessageWindowChatMemory
from .domain.exceptions import ConfigurationError
from .infrastructure.config import RedisMemoryConfig
from .infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)


def create_chat_memory_repository(
    config: Optional[RedisMemoryConfig] = None,
    *,
    client: Optional[redis.Redis] = None,
    serializer: Optional[MessageSerializer] = None,
) -> ChatMemoryRepository:
    """
    Build the repository selected by ``config.backend``.

    Also configures the ``chatmemory`` logger at ``config.log_level``.

    Args:
        config: Configuration (default: loaded from the environment)
        client: Existing redis client to use instead of building one
        serializer: Message serializer for the Redis backend

    Returns:
        A ChatMemoryRepository implementation

    Raises:
        ConfigurationError: If the backend is unknown
    """
    config = config or RedisMemoryConfig.from_env()
    setup_logging(level=config.log_level)
    logger.info(f"Creating chat memory repository: {config.redacted()}")

    if config.backend == "memory":
        return InMemoryChatMemoryRepository()

    if config.backend == "redis":
        if client is None:
            return RedisChatMemoryRepository.from_config(config, serializer=serializer)
        return RedisChatMemoryRepository(
            client,
            serializer=serializer,
            key_prefix=config.key_prefix,
            scan_count=config.scan_count,
            atomic_save=config.atomic_save,
        )

    raise ConfigurationError(f"Unknown backend: {config.backend}", setting="backend")


def create_chat_memory(
    config: Optional[RedisMemoryConfig] = None,
    repository: Optional[ChatMemoryRepository] = None,
) -> MessageWindowChatMemory:
    """
    Build a MessageWindowChatMemory.

    An already-built repository is used as-is; otherwise one is created
    from configuration.
    """
    config = config or RedisMemoryConfig.from_env()
    setup_logging(level=config.log_level)
    if repository is None:
        repository = create_chat_memory_repository(config)
    return MessageWindowChatMemory(repository, max_messages=config.max_messages)
