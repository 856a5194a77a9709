"""Redis implementation of ChatMemoryRepository."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
import logging
import re
from typing import Optional

import redis
from redis.exceptions import RedisError

from ....application.ports.message_serializer import MessageSerializer
from ....domain.entities import Message
from ....domain.exceptions import (
    InvalidArgument,
    SerializationError,
    StoreClosedError,
    StoreCommunicationError,
)
from ....domain.value_objects import ConversationId
from ....infrastructure.config import DEFAULT_KEY_PREFIX, RedisMemoryConfig
from ....infrastructure.logging import LoggerAdapter
from ..serialization import JsonMessageSerializer

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


class RedisChatMemoryRepository:
    """
    Stores each conversation as a Redis list under ``key_prefix + id``.

    Every element of the list is one serialized message; list order is
    conversation order. Saving replaces the whole list.

    Two save modes are available:

    - default: DEL then one RPUSH per message. Not atomic. A concurrent
      reader can observe an empty or partial history, and a serialization
      failure part way through leaves the earlier messages written.
    - ``atomic_save=True``: every message is serialized up front, then DEL
      and a single RPUSH run inside MULTI/EXEC.

    No locking, retries or timeouts beyond those of the redis client are
    added. Callers that need per-conversation write ordering must
    serialize their save_all calls themselves.

    Example:
        config = RedisMemoryConfig.from_env()
        with RedisChatMemoryRepository.from_config(config) as repo:
            repo.save_all("u1", [UserMessage(text="hi")])
            repo.find_messages("u1")
    """

    def __init__(
        self,
        client: redis.Redis,
        serializer: Optional[MessageSerializer] = None,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        scan_count: int = 100,
        atomic_save: bool = False,
    ) -> None:
        """
        Initialize the repository.

        Args:
            client: A connected redis client; the repository takes ownership
                and closes it in close()
            serializer: Message encoder/decoder (defaults to JSON)
            key_prefix: Namespace prepended to every conversation id
            scan_count: COUNT hint for each SCAN page
            atomic_save: Replace histories transactionally
        """
        if not key_prefix:
            raise InvalidArgument("key_prefix cannot be empty", argument="key_prefix")
        self._client = client
        self._serializer = serializer or JsonMessageSerializer()
        self._key_prefix = key_prefix
        self._match_pattern = _GLOB_SPECIAL.sub(r"\\\1", key_prefix) + "*"
        self._scan_count = scan_count
        self._atomic_save = atomic_save
        self._closed = False

    @classmethod
    def from_config(
        cls,
        config: RedisMemoryConfig,
        serializer: Optional[MessageSerializer] = None,
    ) -> "RedisChatMemoryRepository":
        """Build a repository and its redis client from configuration."""
        client = redis.Redis(
            host=config.host,
            port=config.port,
            db=config.db,
            username=config.username,
            password=config.password,
            ssl=config.ssl,
            client_name=config.client_name,
            socket_timeout=config.timeout_seconds,
            socket_connect_timeout=config.timeout_seconds,
            decode_responses=True,
        )
        logger.info(
            f"Redis chat memory configured for {config.host}:{config.port}/{config.db} "
            f"(prefix={config.key_prefix!r}, ssl={config.ssl}, atomic_save={config.atomic_save})"
        )
        return cls(
            client,
            serializer=serializer,
            key_prefix=config.key_prefix,
            scan_count=config.scan_count,
            atomic_save=config.atomic_save,
        )

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    @property
    def closed(self) -> bool:
        return self._closed

    def key_for(self, conversation_id: ConversationId | str) -> str:
        """Return the Redis key holding a conversation's history."""
        return self._key_prefix + str(ConversationId.of(conversation_id))

    # ------------------------------------------------------------------
    # ChatMemoryRepository
    # ------------------------------------------------------------------

    def list_conversation_ids(self) -> list[str]:
        self._ensure_open()
        keys: dict[str, None] = {}
        cursor = 0
        pages = 0
        with self._store_errors("SCAN"):
            while True:
                cursor, page = self._client.scan(
                    cursor=cursor, match=self._match_pattern, count=self._scan_count
                )
                pages += 1
                for key in page or ():
                    keys[_as_str(key)] = None
                if int(cursor) == 0:
                    break
        logger.debug(f"SCAN {self._match_pattern!r} returned {len(keys)} key(s) in {pages} page(s)")
        prefix_length = len(self._key_prefix)
        return [key[prefix_length:] for key in keys]

    def find_messages(self, conversation_id: ConversationId | str) -> list[Message]:
        key = self.key_for(conversation_id)
        self._ensure_open()
        with self._store_errors("LRANGE"):
            payloads = self._client.lrange(key, 0, -1)
        self._conversation_logger(key).debug(f"Read {len(payloads)} message(s)")
        return [self._decode(payload) for payload in payloads]

    def save_all(
        self, conversation_id: ConversationId | str, messages: Sequence[Message]
    ) -> None:
        key = self.key_for(conversation_id)
        if messages is None:
            raise InvalidArgument("messages cannot be null", argument="messages")
        messages = list(messages)
        if any(message is None for message in messages):
            raise InvalidArgument(
                "messages cannot contain null elements", argument="messages"
            )
        self._ensure_open()

        if self._atomic_save:
            self._replace_atomically(key, messages)
        else:
            self._replace(key, messages)
        self._conversation_logger(key).debug(f"Saved {len(messages)} message(s)")

    def delete_conversation(self, conversation_id: ConversationId | str) -> None:
        key = self.key_for(conversation_id)
        self._ensure_open()
        with self._store_errors("DEL"):
            self._client.delete(key)
        self._conversation_logger(key).debug("Deleted history")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the redis connection pool. Further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        with self._store_errors("CLOSE"):
            self._client.close()
            # Redis.close() leaves a caller-supplied ConnectionPool connected
            self._client.connection_pool.disconnect()
        logger.info("Redis connection pool closed")

    def __enter__(self) -> "RedisChatMemoryRepository":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replace(self, key: str, messages: Sequence[Message]) -> None:
        with self._store_errors("DEL"):
            self._client.delete(key)
        for message in messages:
            payload = self._encode(message)
            with self._store_errors("RPUSH"):
                self._client.rpush(key, payload)

    def _replace_atomically(self, key: str, messages: Sequence[Message]) -> None:
        payloads = [self._encode(message) for message in messages]
        with self._store_errors("MULTI"):
            with self._client.pipeline(transaction=True) as pipe:
                pipe.delete(key)
                if payloads:
                    pipe.rpush(key, *payloads)
                pipe.execute()

    def _encode(self, message: Message) -> str:
        with self._serialization_errors("serializing"):
            return self._serializer.serialize(message)

    def _decode(self, payload: str | bytes) -> Message:
        with self._serialization_errors("deserializing"):
            return self._serializer.deserialize(payload)

    def _conversation_logger(self, key: str) -> LoggerAdapter:
        return LoggerAdapter(
            logger, {"conversation_id": key[len(self._key_prefix):], "redis_key": key}
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError()

    @contextmanager
    def _store_errors(self, command: str) -> Iterator[None]:
        try:
            yield
        except RedisError as e:
            logger.warning(f"Redis {command} failed: {e}")
            raise StoreCommunicationError(
                f"Redis {command} failed: {e}", command=command
            ) from e

    @contextmanager
    def _serialization_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except SerializationError:
            raise
        except Exception as e:
            raise SerializationError(
                f"Error {action} message: {e}",
                details={"serializer": type(self._serializer).__name__},
            ) from e


def _as_str(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value
