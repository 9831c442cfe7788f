# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Session, message and part models.

Messages are tagged by ``role``, parts by ``type`` and tool states by
``status``; each tagged family is exposed as an annotated union that
pydantic validates by its discriminator.
"""

from typing import Annotated, Literal

from pydantic import Field, JsonValue

from .base import OpencodeModel
from .shared import SessionError

# =============================================================================
# Session
# =============================================================================


class SessionTime(OpencodeModel):
    created: float
    updated: float


class SessionRevert(OpencodeModel):
    message_id: str = Field(alias="messageID")
    diff: str | None = None
    part_id: str | None = Field(default=None, alias="partID")
    snapshot: str | None = None


class SessionShare(OpencodeModel):
    url: str


class Session(OpencodeModel):
    """A conversation with the agent."""

    id: str
    time: SessionTime
    title: str
    version: str
    parent_id: str | None = Field(default=None, alias="parentID")
    revert: SessionRevert | None = None
    share: SessionShare | None = None


# =============================================================================
# Messages
# =============================================================================


class UserMessageTime(OpencodeModel):
    created: float


class UserMessage(OpencodeModel):
    role: Literal["user"] = "user"
    id: str
    session_id: str = Field(alias="sessionID")
    time: UserMessageTime


class AssistantMessagePath(OpencodeModel):
    cwd: str
    root: str


class AssistantMessageTime(OpencodeModel):
    created: float
    completed: float | None = None


class TokenCache(OpencodeModel):
    read: int
    write: int


class AssistantMessageTokens(OpencodeModel):
    cache: TokenCache
    input: int
    output: int
    reasoning: int


class AssistantMessage(OpencodeModel):
    role: Literal["assistant"] = "assistant"
    id: str
    cost: float
    mode: str
    model_id: str = Field(alias="modelID")
    path: AssistantMessagePath
    provider_id: str = Field(alias="providerID")
    session_id: str = Field(alias="sessionID")
    system: list[str]
    time: AssistantMessageTime
    tokens: AssistantMessageTokens
    error: SessionError | None = None
    summary: bool | None = None


Message = Annotated[UserMessage | AssistantMessage, Field(discriminator="role")]


# =============================================================================
# File part sources
# =============================================================================


class FilePartSourceText(OpencodeModel):
    end: int
    start: int
    value: str


class FileSource(OpencodeModel):
    type: Literal["file"] = "file"
    path: str
    text: FilePartSourceText


class SymbolSourcePosition(OpencodeModel):
    character: int
    line: int


class SymbolSourceRange(OpencodeModel):
    end: SymbolSourcePosition
    start: SymbolSourcePosition


class SymbolSource(OpencodeModel):
    type: Literal["symbol"] = "symbol"
    kind: int
    name: str
    path: str
    range: SymbolSourceRange
    text: FilePartSourceText


FilePartSource = Annotated[FileSource | SymbolSource, Field(discriminator="type")]


# =============================================================================
# Tool states
# =============================================================================


class ToolStatePending(OpencodeModel):
    status: Literal["pending"] = "pending"


class ToolStateRunningTime(OpencodeModel):
    start: float


class ToolStateRunning(OpencodeModel):
    status: Literal["running"] = "running"
    time: ToolStateRunningTime
    input: JsonValue = None
    metadata: dict[str, JsonValue] | None = None
    title: str | None = None


class ToolStateCompletedTime(OpencodeModel):
    end: float
    start: float


class ToolStateCompleted(OpencodeModel):
    status: Literal["completed"] = "completed"
    input: dict[str, JsonValue]
    metadata: dict[str, JsonValue]
    output: str
    time: ToolStateCompletedTime
    title: str


class ToolStateErrorTime(OpencodeModel):
    end: float
    start: float


class ToolStateError(OpencodeModel):
    status: Literal["error"] = "error"
    error: str
    input: dict[str, JsonValue]
    time: ToolStateErrorTime


ToolState = Annotated[
    ToolStatePending | ToolStateRunning | ToolStateCompleted | ToolStateError,
    Field(discriminator="status"),
]


# =============================================================================
# Parts
# =============================================================================


class TextPartTime(OpencodeModel):
    start: float
    end: float | None = None


class TextPart(OpencodeModel):
    type: Literal["text"] = "text"
    id: str
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")
    text: str
    synthetic: bool | None = None
    time: TextPartTime | None = None


class FilePart(OpencodeModel):
    type: Literal["file"] = "file"
    id: str
    message_id: str = Field(alias="messageID")
    mime: str
    session_id: str = Field(alias="sessionID")
    url: str
    filename: str | None = None
    source: FilePartSource | None = None


class ToolPart(OpencodeModel):
    type: Literal["tool"] = "tool"
    id: str
    call_id: str = Field(alias="callID")
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")
    state: ToolState
    tool: str


class StepStartPart(OpencodeModel):
    type: Literal["step-start"] = "step-start"
    id: str
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")


class StepFinishTokens(OpencodeModel):
    cache: TokenCache
    input: int
    output: int
    reasoning: int


class StepFinishPart(OpencodeModel):
    type: Literal["step-finish"] = "step-finish"
    id: str
    cost: float
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")
    tokens: StepFinishTokens


class SnapshotPart(OpencodeModel):
    type: Literal["snapshot"] = "snapshot"
    id: str
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")
    snapshot: str


class PatchPart(OpencodeModel):
    type: Literal["patch"] = "patch"
    id: str
    files: list[str]
    hash: str
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")


Part = Annotated[
    TextPart
    | FilePart
    | ToolPart
    | StepStartPart
    | StepFinishPart
    | SnapshotPart
    | PatchPart,
    Field(discriminator="type"),
]


# =============================================================================
# Inputs and params
# =============================================================================


class TextPartInputTime(OpencodeModel):
    start: float
    end: float | None = None


class TextPartInput(OpencodeModel):
    type: Literal["text"] = "text"
    text: str
    id: str | None = None
    synthetic: bool | None = None
    time: TextPartInputTime | None = None


class FilePartInput(OpencodeModel):
    type: Literal["file"] = "file"
    mime: str
    url: str
    id: str | None = None
    filename: str | None = None
    source: FilePartSource | None = None


PartInput = Annotated[TextPartInput | FilePartInput, Field(discriminator="type")]


class SessionMessagesResponseItem(OpencodeModel):
    info: Message
    parts: list[Part]


class SessionChatParams(OpencodeModel):
    """Body of ``POST /session/{id}/message``."""

    model_id: str = Field(alias="modelID")
    parts: list[PartInput]
    provider_id: str = Field(alias="providerID")
    message_id: str | None = Field(default=None, alias="messageID")
    mode: str | None = None
    system: str | None = None
    tools: dict[str, bool] | None = None


class SessionInitParams(OpencodeModel):
    message_id: str = Field(alias="messageID")
    model_id: str = Field(alias="modelID")
    provider_id: str = Field(alias="providerID")


class SessionRevertParams(OpencodeModel):
    message_id: str = Field(alias="messageID")
    part_id: str | None = Field(default=None, alias="partID")


class SessionSummarizeParams(OpencodeModel):
    model_id: str = Field(alias="modelID")
    provider_id: str = Field(alias="providerID")


__all__ = [
    "AssistantMessage",
    "AssistantMessagePath",
    "AssistantMessageTime",
    "AssistantMessageTokens",
    "FilePart",
    "FilePartInput",
    "FilePartSource",
    "FilePartSourceText",
    "FileSource",
    "Message",
    "Part",
    "PartInput",
    "PatchPart",
    "Session",
    "SessionChatParams",
    "SessionInitParams",
    "SessionMessagesResponseItem",
    "SessionRevert",
    "SessionRevertParams",
    "SessionShare",
    "SessionSummarizeParams",
    "SessionTime",
    "SnapshotPart",
    "StepFinishPart",
    "StepFinishTokens",
    "StepStartPart",
    "SymbolSource",
    "SymbolSourcePosition",
    "SymbolSourceRange",
    "TextPart",
    "TextPartInput",
    "TextPartInputTime",
    "TextPartTime",
    "TokenCache",
    "ToolPart",
    "ToolState",
    "ToolStateCompleted",
    "ToolStateCompletedTime",
    "ToolStateError",
    "ToolStateErrorTime",
    "ToolStatePending",
    "ToolStateRunning",
    "ToolStateRunningTime",
    "UserMessage",
    "UserMessageTime",
]
