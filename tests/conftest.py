"""Shared fixtures for chatmemory tests."""

import fakeredis
import pytest

from chatmemory import (
    AssistantMessage,
    InMemoryChatMemoryRepository,
    RedisChatMemoryRepository,
    UserMessage,
)


@pytest.fixture
def redis_client():
    """Provide an isolated in-process Redis."""
    client = fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield client
    client.close()


@pytest.fixture
def redis_repo(redis_client) -> RedisChatMemoryRepository:
    """Provide a Redis repository with the default prefix."""
    return RedisChatMemoryRepository(redis_client)


@pytest.fixture
def atomic_redis_repo(redis_client) -> RedisChatMemoryRepository:
    """Provide a Redis repository that replaces histories in MULTI/EXEC."""
    return RedisChatMemoryRepository(redis_client, atomic_save=True)


@pytest.fixture
def memory_repo() -> InMemoryChatMemoryRepository:
    """Provide an in-memory repository."""
    return InMemoryChatMemoryRepository()


@pytest.fixture
def greeting() -> list:
    """A two-message exchange."""
    return [UserMessage(text="hi"), AssistantMessage(text="hello")]
