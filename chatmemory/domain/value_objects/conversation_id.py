"""Strongly-typed identifier for conversations."""

from dataclasses import dataclass
from typing import Union

from ..exceptions import InvalidArgument


@dataclass(frozen=True)
class ConversationId:
    """
    Strongly-typed identifier for conversations.
    
    Immutable value object that ensures conversation IDs are never blank
    and provides a type-safe way to pass around conversation identifiers.
    """
    
    value: str
    
    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidArgument(
                "conversationId must be a string", argument="conversation_id"
            )
        if not self.value.strip():
            raise InvalidArgument(
                "conversationId cannot be null or empty", argument="conversation_id"
            )
    
    def __str__(self) -> str:
        return self.value
    
    def __repr__(self) -> str:
        return f"ConversationId({self.value!r})"
    
    @classmethod
    def of(cls, value: Union["ConversationId", str, None]) -> "ConversationId":
        """Coerce a raw string (or an existing id) into a validated ConversationId."""
        if isinstance(value, ConversationId):
            return value
        if value is None:
            raise InvalidArgument(
                "conversationId cannot be null or empty", argument="conversation_id"
            )
        return cls(value)
