"""
Value Objects - Immutable objects without identity.

Two value objects are equal if all their attributes are equal.
"""

from .conversation_id import ConversationId

__all__ = [
    "ConversationId",
]
