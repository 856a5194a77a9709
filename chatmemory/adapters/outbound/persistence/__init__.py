"""
Persistence Adapters - Repository Implementations.

This module contains repository implementations for conversation histories.

Implementations:
    - InMemoryChatMemoryRepository: For testing and simple use cases
    - RedisChatMemoryRepository: Redis lists keyed by conversation id
"""

from .in_memory_chat_memory_repo import InMemoryChatMemoryRepository
from .redis_chat_memory_repo import RedisChatMemoryRepository

__all__ = [
    "InMemoryChatMemoryRepository",
    "RedisChatMemoryRepository",
]
