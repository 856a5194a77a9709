"""Tests for JsonMessageSerializer."""

import json

import pytest

from chatmemory import (
    AssistantMessage,
    JsonMessageSerializer,
    MessageSerializer,
    SerializationError,
    SystemMessage,
    ToolResponseMessage,
    UserMessage,
)
from chatmemory.domain.entities import Media, ToolCall, ToolResponse


@pytest.fixture
def serializer() -> JsonMessageSerializer:
    return JsonMessageSerializer()


class TestSerialize:

    def test_implements_port(self, serializer):
        assert isinstance(serializer, MessageSerializer)

    def test_payload_is_tagged_json(self, serializer):
        payload = json.loads(serializer.serialize(UserMessage(text="hi", metadata={"lang": "en"})))
        assert payload["message_type"] == "user"
        assert payload["text"] == "hi"
        assert payload["metadata"] == {"lang": "en"}

    def test_assistant_tool_calls_are_written(self, serializer):
        message = AssistantMessage(tool_calls=[ToolCall(id="tc-1", name="kubectl", arguments="{}")])
        payload = json.loads(serializer.serialize(message))
        assert payload["tool_calls"] == [
            {"id": "tc-1", "type": "function", "name": "kubectl", "arguments": "{}"}
        ]

    def test_rejects_non_message(self, serializer):
        with pytest.raises(SerializationError, match="unsupported type dict"):
            serializer.serialize({"message_type": "user", "text": "hi"})

    def test_rejects_unencodable_metadata(self, serializer):
        with pytest.raises(SerializationError) as exc_info:
            serializer.serialize(UserMessage(text="hi", metadata={"obj": object()}))
        assert exc_info.value.__cause__ is not None


class TestDeserialize:

    def test_dispatches_on_message_type(self, serializer):
        payloads = {
            "user": UserMessage,
            "assistant": AssistantMessage,
            "system": SystemMessage,
            "tool": ToolResponseMessage,
        }
        for message_type, expected in payloads.items():
            message = serializer.deserialize(json.dumps({"message_type": message_type, "text": "x"}))
            assert type(message) is expected

    def test_restores_nested_fields(self, serializer):
        original = [
            UserMessage(text="look", media=[Media(mime_type="image/png", data="aGk=", name="a.png")]),
            ToolResponseMessage(responses=[ToolResponse(id="tc-1", name="kubectl", response_data="ok")]),
        ]
        for message in original:
            assert serializer.deserialize(serializer.serialize(message)) == message

    def test_accepts_bytes(self, serializer):
        message = serializer.deserialize(b'{"message_type": "system", "text": "be brief"}')
        assert message == SystemMessage(text="be brief")

    def test_unknown_message_type(self, serializer):
        with pytest.raises(SerializationError, match="Error deserializing message"):
            serializer.deserialize('{"message_type": "function", "text": "x"}')

    def test_missing_message_type(self, serializer):
        with pytest.raises(SerializationError):
            serializer.deserialize('{"text": "x"}')

    def test_malformed_json(self, serializer):
        with pytest.raises(SerializationError) as exc_info:
            serializer.deserialize("{not json")
        assert exc_info.value.details["errors"]
