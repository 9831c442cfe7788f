"""
Unit tests for the API models.

Tests cover:
- Wire aliases (camelCase / ...ID) accepted and produced
- Discriminated unions for messages, parts, tool states, errors and events
- Unknown fields preserved
- Request bodies omit unset optionals
"""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from opencode_sdk.types import (
    AssistantMessage,
    Config,
    EventListResponse,
    FileContent,
    McpLocalConfig,
    MessagePartUpdatedEvent,
    Part,
    ServerConnectedEvent,
    Session,
    SessionChatParams,
    SessionErrorEvent,
    SessionMessagesResponseItem,
    TextPart,
    TextPartInput,
    ToolPart,
)
from opencode_sdk.types.session import ToolStateCompleted, UserMessage
from opencode_sdk.types.shared import ProviderAuthError

SESSION = {
    "id": "ses_1",
    "time": {"created": 1700000000000, "updated": 1700000001000},
    "title": "Fix the tests",
    "version": "0.3.0",
    "parentID": "ses_0",
}

ASSISTANT = {
    "role": "assistant",
    "id": "msg_2",
    "cost": 0.01,
    "mode": "build",
    "modelID": "claude-sonnet-4",
    "path": {"cwd": "/repo", "root": "/repo"},
    "providerID": "anthropic",
    "sessionID": "ses_1",
    "system": ["You are helpful"],
    "time": {"created": 1.0, "completed": 2.0},
    "tokens": {
        "cache": {"read": 0, "write": 0},
        "input": 10,
        "output": 20,
        "reasoning": 0,
    },
}


class TestSession:
    """Tests for Session and message models."""

    def test_aliases(self) -> None:
        session = Session.model_validate(SESSION)
        assert session.parent_id == "ses_0"
        assert session.revert is None

    def test_unknown_fields_preserved(self) -> None:
        session = Session.model_validate({**SESSION, "newField": 1})
        assert session.model_extra == {"newField": 1}

    def test_assistant_message(self) -> None:
        message = AssistantMessage.model_validate(ASSISTANT)
        assert message.model_id == "claude-sonnet-4"
        assert message.tokens.output == 20
        assert message.error is None

    def test_assistant_error_discriminated(self) -> None:
        payload = {
            **ASSISTANT,
            "error": {
                "name": "ProviderAuthError",
                "data": {"message": "bad key", "providerID": "anthropic"},
            },
        }
        message = AssistantMessage.model_validate(payload)
        assert isinstance(message.error, ProviderAuthError)
        assert message.error.data.provider_id == "anthropic"

    def test_messages_response_item(self) -> None:
        item = SessionMessagesResponseItem.model_validate(
            {
                "info": {
                    "role": "user",
                    "id": "msg_1",
                    "sessionID": "ses_1",
                    "time": {"created": 1.0},
                },
                "parts": [
                    {
                        "type": "text",
                        "id": "prt_1",
                        "messageID": "msg_1",
                        "sessionID": "ses_1",
                        "text": "hi",
                    }
                ],
            }
        )
        assert isinstance(item.info, UserMessage)
        assert isinstance(item.parts[0], TextPart)


class TestParts:
    """Tests for the Part union."""

    def test_tool_part_with_completed_state(self) -> None:
        part = TypeAdapter(Part).validate_python(
            {
                "type": "tool",
                "id": "prt_2",
                "callID": "call_1",
                "messageID": "msg_2",
                "sessionID": "ses_1",
                "tool": "bash",
                "state": {
                    "status": "completed",
                    "input": {"command": "ls"},
                    "metadata": {},
                    "output": "README.md",
                    "time": {"start": 1.0, "end": 2.0},
                    "title": "ls",
                },
            }
        )
        assert isinstance(part, ToolPart)
        assert isinstance(part.state, ToolStateCompleted)
        assert part.state.output == "README.md"

    def test_unknown_part_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(Part).validate_python({"type": "hologram", "id": "x"})


class TestRequestBodies:
    """Tests for serializing request models."""

    def test_chat_params_body(self) -> None:
        params = SessionChatParams(
            model_id="claude-sonnet-4",
            provider_id="anthropic",
            parts=[TextPartInput(text="Hello")],
        )
        assert params.to_body() == {
            "modelID": "claude-sonnet-4",
            "providerID": "anthropic",
            "parts": [{"type": "text", "text": "Hello"}],
        }

    def test_populate_by_alias(self) -> None:
        params = SessionChatParams.model_validate(
            {
                "modelID": "m",
                "providerID": "p",
                "parts": [{"type": "file", "mime": "text/plain", "url": "file:///a"}],
            }
        )
        assert params.model_id == "m"
        assert params.parts[0].type == "file"


class TestEvents:
    """Tests for the event union."""

    adapter = TypeAdapter(EventListResponse)

    def test_server_connected_without_properties(self) -> None:
        event = self.adapter.validate_json('{"type":"server.connected"}')
        assert isinstance(event, ServerConnectedEvent)

    def test_message_part_updated(self) -> None:
        event = self.adapter.validate_python(
            {
                "type": "message.part.updated",
                "properties": {
                    "part": {
                        "type": "text",
                        "id": "prt_1",
                        "messageID": "msg_1",
                        "sessionID": "ses_1",
                        "text": "partial",
                    }
                },
            }
        )
        assert isinstance(event, MessagePartUpdatedEvent)
        assert isinstance(event.properties.part, TextPart)

    def test_session_error_event(self) -> None:
        event = self.adapter.validate_python(
            {
                "type": "session.error",
                "properties": {
                    "error": {"name": "UnknownError", "data": {"message": "boom"}}
                },
            }
        )
        assert isinstance(event, SessionErrorEvent)
        assert event.properties.error is not None
        assert event.properties.error.name == "UnknownError"

    def test_unknown_event_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self.adapter.validate_json('{"type":"not.a.thing","properties":{}}')


class TestOtherModels:
    """Tests for file and config models."""

    def test_file_content_alias(self) -> None:
        content = FileContent.model_validate({"type": "text", "content": "x = 1\n"})
        assert content.patch is None

    def test_config_schema_alias(self) -> None:
        config = Config.model_validate(
            {
                "$schema": "https://opencode.ai/config.json",
                "mcp": {"fs": {"type": "local", "command": ["mcp-fs"]}},
                "share": "manual",
            }
        )
        assert config.schema_ == "https://opencode.ai/config.json"
        assert isinstance(config.mcp["fs"], McpLocalConfig)

    def test_config_rejects_bad_share(self) -> None:
        with pytest.raises(ValidationError):
            Config.model_validate({"share": "sometimes"})
