"""Tests for the domain layer."""

import pytest
from pydantic import ValidationError

from chatmemory.domain import (
    AssistantMessage,
    ChatMemoryError,
    ConversationId,
    InvalidArgument,
    MessageType,
    SystemMessage,
    ToolResponseMessage,
    UserMessage,
)
from chatmemory.domain.entities import ToolCall, ToolResponse

# =============================================================================
# Value Object Tests
# =============================================================================


class TestConversationId:
    """Tests for ConversationId value object."""

    def test_create_with_valid_value(self):
        id = ConversationId("u1")
        assert str(id) == "u1"

    def test_equality_is_by_value(self):
        assert ConversationId("u1") == ConversationId("u1")
        assert ConversationId("u1") != ConversationId("u2")

    def test_empty_value_raises_error(self):
        with pytest.raises(InvalidArgument, match="cannot be null or empty"):
            ConversationId("")

    def test_blank_value_raises_error(self):
        with pytest.raises(InvalidArgument):
            ConversationId("   \t")

    def test_non_string_raises_error(self):
        with pytest.raises(InvalidArgument, match="must be a string"):
            ConversationId(42)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            ConversationId("")

    def test_of_accepts_string_and_id(self):
        id = ConversationId("u1")
        assert ConversationId.of("u1") == id
        assert ConversationId.of(id) is id

    def test_of_none_raises_error(self):
        with pytest.raises(InvalidArgument) as exc_info:
            ConversationId.of(None)
        assert exc_info.value.argument == "conversation_id"
        assert isinstance(exc_info.value, ChatMemoryError)


# =============================================================================
# Message Tests
# =============================================================================


class TestMessages:
    """Tests for the message union."""

    def test_roles(self):
        assert UserMessage(text="a").role == MessageType.USER
        assert AssistantMessage(text="a").role == MessageType.ASSISTANT
        assert SystemMessage(text="a").role == MessageType.SYSTEM
        assert ToolResponseMessage().role == MessageType.TOOL

    def test_equality_is_by_value(self):
        assert UserMessage(text="hi", metadata={"k": 1}) == UserMessage(text="hi", metadata={"k": 1})
        assert UserMessage(text="hi") != AssistantMessage(text="hi")

    def test_messages_are_immutable(self):
        message = UserMessage(text="hi")
        with pytest.raises(ValidationError):
            message.text = "changed"

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            UserMessage(text="hi", tool_calls=[])

    def test_assistant_tool_calls(self):
        message = AssistantMessage(
            tool_calls=[ToolCall(id="tc-1", name="get_weather", arguments='{"city": "Oslo"}')]
        )
        assert message.has_tool_calls
        assert message.tool_calls[0].type == "function"
        assert not AssistantMessage(text="done").has_tool_calls

    def test_tool_response_defaults(self):
        response = ToolResponse(id="tc-1", name="get_weather")
        assert response.response_data == ""

    def test_repr_truncates_long_text(self):
        text = "x" * 80
        assert repr(UserMessage(text=text)) == f"UserMessage(text={'x' * 50 + '...'!r})"
