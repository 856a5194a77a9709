"""MessageSerializer port - converts messages to and from their stored form."""

from typing import Protocol, runtime_checkable

from ...domain.entities import Message


@runtime_checkable
class MessageSerializer(Protocol):
    """
    Encoder/decoder for a single message.

    Implementations may raise any exception for a payload or message they
    cannot handle; repositories report it to callers as SerializationError.
    """

    def serialize(self, message: Message) -> str:
        """Encode a message as a string."""
        ...

    def deserialize(self, payload: str | bytes) -> Message:
        """Decode a string produced by serialize() back into a message."""
        ...
