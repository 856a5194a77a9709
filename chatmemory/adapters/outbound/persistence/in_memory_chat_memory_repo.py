"""In-memory implementation of ChatMemoryRepository."""

from collections.abc import Sequence
from typing import Dict, List
import threading

from ....domain.entities import Message
from ....domain.exceptions import InvalidArgument
from ....domain.value_objects import ConversationId


class InMemoryChatMemoryRepository:
    """
    In-memory implementation of ChatMemoryRepository.
    
    This implementation stores histories in a dictionary,
    suitable for:
    - Testing
    - Development
    - Single-instance deployments
    
    Note: Data is lost when the process ends. For shared or
    persistent storage, use RedisChatMemoryRepository.
    
    Thread-safe: Uses a lock for concurrent access, so save_all is
    atomic here even though it is not in the Redis implementation.
    
    Example:
        repo = InMemoryChatMemoryRepository()
        repo.save_all("conv-1", [UserMessage(text="hi")])
        loaded = repo.find_messages("conv-1")
    """
    
    def __init__(self) -> None:
        """Initialize the repository."""
        self._store: Dict[str, List[Message]] = {}
        self._lock = threading.RLock()
    
    def list_conversation_ids(self) -> List[str]:
        with self._lock:
            return list(self._store)
    
    def find_messages(self, conversation_id: ConversationId | str) -> List[Message]:
        key = str(ConversationId.of(conversation_id))
        with self._lock:
            return list(self._store.get(key, ()))
    
    def save_all(
        self, conversation_id: ConversationId | str, messages: Sequence[Message]
    ) -> None:
        key = str(ConversationId.of(conversation_id))
        if messages is None:
            raise InvalidArgument("messages cannot be null", argument="messages")
        messages = list(messages)
        if any(message is None for message in messages):
            raise InvalidArgument(
                "messages cannot contain null elements", argument="messages"
            )
        with self._lock:
            # An empty history leaves no entry behind, as an empty Redis list would
            if messages:
                self._store[key] = messages
            else:
                self._store.pop(key, None)
    
    def delete_conversation(self, conversation_id: ConversationId | str) -> None:
        key = str(ConversationId.of(conversation_id))
        with self._lock:
            self._store.pop(key, None)
    
    def close(self) -> None:
        """Nothing to release; present so callers can treat backends alike."""
    
    def clear(self) -> None:
        """Clear all stored conversations."""
        with self._lock:
            self._store.clear()
    
    def count(self) -> int:
        """Get the number of stored conversations."""
        with self._lock:
            return len(self._store)
