"""MessageWindowChatMemory - bounded conversation memory over a repository."""

import logging
from collections.abc import Iterable

from ...domain.entities import MESSAGE_CLASSES, Message, SystemMessage
from ...domain.exceptions import InvalidArgument
from ...domain.value_objects import ConversationId
from ...infrastructure.logging import LoggerAdapter
from ..ports.chat_memory_repository import ChatMemoryRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_MESSAGES = 20


class MessageWindowChatMemory:
    """
    Chat memory that keeps at most ``max_messages`` per conversation.

    Each add() reads the stored history, appends the new messages, trims
    the result and writes it back with save_all(). Trimming follows two
    rules:

    1. If the new messages bring a system message the history does not
       already contain, earlier system messages are dropped.
    2. While over the limit, the oldest non-system messages are evicted.
       System messages are never evicted, so a history made only of
       system messages may exceed the limit.

    The read-modify-write is not atomic. Concurrent add() calls for the
    same conversation can lose messages unless the caller serializes them.

    Example:
        memory = MessageWindowChatMemory(InMemoryChatMemoryRepository(), max_messages=10)
        memory.add("conv-1", UserMessage(text="What pods are running?"))
        memory.add("conv-1", AssistantMessage(text="Three pods in default."))
        memory.get("conv-1")
    """

    def __init__(
        self,
        repository: ChatMemoryRepository,
        max_messages: int = DEFAULT_MAX_MESSAGES,
    ) -> None:
        """
        Initialize the memory.

        Args:
            repository: Where histories are stored
            max_messages: Window size, must be positive
        """
        if max_messages < 1:
            raise InvalidArgument("max_messages must be greater than 0", argument="max_messages")
        self._repository = repository
        self._max_messages = max_messages

    @property
    def repository(self) -> ChatMemoryRepository:
        return self._repository

    @property
    def max_messages(self) -> int:
        return self._max_messages

    def add(
        self,
        conversation_id: ConversationId | str,
        messages: Message | Iterable[Message],
    ) -> None:
        """
        Append one message, or any iterable of messages, to a conversation.

        Args:
            conversation_id: The conversation to extend
            messages: Message(s) to append, in order
        """
        conversation_id = ConversationId.of(conversation_id)
        if messages is None:
            raise InvalidArgument("messages cannot be null", argument="messages")
        # Message models are themselves iterable (over their fields)
        if isinstance(messages, MESSAGE_CLASSES) or not isinstance(messages, Iterable):
            messages = [messages]
        else:
            messages = list(messages)
        if any(message is None for message in messages):
            raise InvalidArgument(
                "messages cannot contain null elements", argument="messages"
            )

        stored = self._repository.find_messages(conversation_id)
        window = self._apply_window(stored, messages)
        self._repository.save_all(conversation_id, window)
        LoggerAdapter(logger, {"conversation_id": str(conversation_id)}).debug(
            f"{len(stored)} stored + {len(messages)} new -> {len(window)} kept"
        )

    def get(self, conversation_id: ConversationId | str) -> list[Message]:
        """Return the stored history of a conversation."""
        return self._repository.find_messages(ConversationId.of(conversation_id))

    def clear(self, conversation_id: ConversationId | str) -> None:
        """Forget a conversation entirely."""
        self._repository.delete_conversation(ConversationId.of(conversation_id))

    def _apply_window(
        self, stored: list[Message], new: list[Message]
    ) -> list[Message]:
        has_new_system = any(
            isinstance(message, SystemMessage) and message not in stored
            for message in new
        )
        combined = [
            message
            for message in stored
            if not (has_new_system and isinstance(message, SystemMessage))
        ]
        combined.extend(new)

        excess = len(combined) - self._max_messages
        if excess <= 0:
            return combined

        trimmed = []
        removed = 0
        for message in combined:
            if isinstance(message, SystemMessage) or removed >= excess:
                trimmed.append(message)
            else:
                removed += 1
        return trimmed
