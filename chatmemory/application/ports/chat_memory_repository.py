"""ChatMemoryRepository port - persistence interface."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ...domain.entities import Message
from ...domain.value_objects import ConversationId


@runtime_checkable
class ChatMemoryRepository(Protocol):
    """
    Persistence port for conversation histories.

    A history is the full, ordered list of messages for one conversation.
    Implementations store it under the conversation id and replace it
    wholesale on every save.

    Implementations:
        - InMemoryChatMemoryRepository: For testing and single-process use
        - RedisChatMemoryRepository: Redis lists, shared across processes

    Example:
        repo = InMemoryChatMemoryRepository()
        repo.save_all("conv-1", [UserMessage(text="hi")])
        repo.find_messages("conv-1")  # [UserMessage(text='hi')]
    """

    def list_conversation_ids(self) -> list[str]:
        """
        List the ids of every stored conversation.

        Returns:
            All conversation ids, in no particular order
        """
        ...

    def find_messages(self, conversation_id: ConversationId | str) -> list[Message]:
        """
        Load the history of one conversation.

        Args:
            conversation_id: The conversation to read

        Returns:
            The messages in conversation order, or an empty list if none
            were stored
        """
        ...

    def save_all(
        self, conversation_id: ConversationId | str, messages: Sequence[Message]
    ) -> None:
        """
        Replace the history of a conversation.

        This is not an append: whatever was stored before is discarded.

        Args:
            conversation_id: The conversation to write
            messages: The complete new history, in order
        """
        ...

    def delete_conversation(self, conversation_id: ConversationId | str) -> None:
        """
        Delete a conversation's history. Deleting an unknown id is a no-op.

        Args:
            conversation_id: The conversation to delete
        """
        ...
