"""JSON implementation of the MessageSerializer port."""

import logging

from pydantic import TypeAdapter, ValidationError

from ....domain.entities import MESSAGE_CLASSES, Message
from ....domain.exceptions import SerializationError

logger = logging.getLogger(__name__)

_MESSAGE_ADAPTER = TypeAdapter(Message)


class JsonMessageSerializer:
    """
    Encodes messages as JSON objects tagged with ``message_type``.

    Decoding dispatches on the tag to the matching message class, so a
    stored ``{"message_type": "assistant", ...}`` comes back as an
    AssistantMessage with its tool calls intact.

    Example:
        serializer = JsonMessageSerializer()
        payload = serializer.serialize(UserMessage(text="hi"))
        # '{"text":"hi","metadata":{},"message_type":"user","media":[]}'
        serializer.deserialize(payload) == UserMessage(text="hi")  # True
    """

    def serialize(self, message: Message) -> str:
        if not isinstance(message, MESSAGE_CLASSES):
            raise SerializationError(
                f"Error serializing message: unsupported type {type(message).__name__}",
                details={"type": type(message).__name__},
            )
        try:
            return _MESSAGE_ADAPTER.dump_json(message).decode("utf-8")
        except (ValueError, TypeError) as e:
            raise SerializationError("Error serializing message") from e

    def deserialize(self, payload: str | bytes) -> Message:
        try:
            return _MESSAGE_ADAPTER.validate_json(payload)
        except ValidationError as e:
            logger.debug(f"Rejected stored message payload: {e.error_count()} error(s)")
            raise SerializationError(
                "Error deserializing message", details={"errors": e.errors()}
            ) from e
