# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Events delivered by the ``GET /event`` Server-Sent Events feed.

Every event is a JSON object ``{"type": ..., "properties": {...}}``.
EventListResponse is the union of all known events, discriminated on
``type``. An event with an unknown type fails validation; the stream
surfaces that as a SerializationError for that one item and carries on.
"""

from typing import Annotated, Literal

from pydantic import Field, JsonValue

from .base import OpencodeModel
from .session import Message, Part, Session
from .shared import SessionError


class EmptyProperties(OpencodeModel):
    pass


# =============================================================================
# Properties
# =============================================================================


class InstallationProperties(OpencodeModel):
    version: str


class ProjectUpdatedProperties(OpencodeModel):
    properties: JsonValue = None


class ServerInstanceDisposedProperties(OpencodeModel):
    directory: str


class LspClientDiagnosticsProperties(OpencodeModel):
    path: str
    server_id: str = Field(alias="serverID")


class FileEditedProperties(OpencodeModel):
    file: str


class FileWatcherUpdatedProperties(OpencodeModel):
    event: Literal["add", "change", "unlink"]
    file: str


class MessageUpdatedProperties(OpencodeModel):
    info: Message


class MessageRemovedProperties(OpencodeModel):
    message_id: str = Field(alias="messageID")
    session_id: str = Field(alias="sessionID")


class MessagePartUpdatedProperties(OpencodeModel):
    part: Part


class MessagePartDeltaProperties(OpencodeModel):
    """Incremental append to one field of a part, e.g. streamed text."""

    session_id: str = Field(alias="sessionID")
    message_id: str = Field(alias="messageID")
    part_id: str = Field(alias="partID")
    field: str
    delta: str


class MessagePartRemovedProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    message_id: str = Field(alias="messageID")
    part_id: str = Field(alias="partID")


class PermissionRepliedProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    request_id: str = Field(alias="requestID")
    reply: Literal["once", "always", "reject"]


class SessionInfoProperties(OpencodeModel):
    info: Session


class SessionStatusProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    status: JsonValue = None


class SessionIdProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")


class SessionDiffProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    diff: list[JsonValue]


class SessionErrorProperties(OpencodeModel):
    error: SessionError | None = None
    session_id: str | None = Field(default=None, alias="sessionID")


class QuestionRepliedProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    request_id: str = Field(alias="requestID")
    answers: list[list[str]]


class QuestionRejectedProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    request_id: str = Field(alias="requestID")


class Todo(OpencodeModel):
    content: str
    status: str
    priority: str


class TodoUpdatedProperties(OpencodeModel):
    session_id: str = Field(alias="sessionID")
    todos: list[Todo]


class TuiPromptAppendProperties(OpencodeModel):
    text: str


class TuiCommandExecuteProperties(OpencodeModel):
    command: str


class TuiToastShowProperties(OpencodeModel):
    title: str | None = None
    message: str
    variant: Literal["info", "success", "warning", "error"]
    duration: float | None = None


class McpToolsChangedProperties(OpencodeModel):
    server: str


class McpBrowserOpenFailedProperties(OpencodeModel):
    mcp_name: str = Field(alias="mcpName")
    url: str


class CommandExecutedProperties(OpencodeModel):
    name: str
    session_id: str = Field(alias="sessionID")
    arguments: str
    message_id: str = Field(alias="messageID")


class VcsBranchUpdatedProperties(OpencodeModel):
    branch: str | None = None


class Pty(OpencodeModel):
    id: str
    title: str
    command: str
    args: list[str]
    cwd: str
    status: Literal["running", "exited"]
    pid: float


class PtyInfoProperties(OpencodeModel):
    info: Pty


class PtyExitedProperties(OpencodeModel):
    id: str
    exit_code: float = Field(alias="exitCode")


class PtyDeletedProperties(OpencodeModel):
    id: str


class WorktreeReadyProperties(OpencodeModel):
    name: str
    branch: str


class WorktreeFailedProperties(OpencodeModel):
    message: str


# =============================================================================
# Events
# =============================================================================


class InstallationUpdatedEvent(OpencodeModel):
    type: Literal["installation.updated"] = "installation.updated"
    properties: InstallationProperties


class InstallationUpdateAvailableEvent(OpencodeModel):
    type: Literal["installation.update-available"] = "installation.update-available"
    properties: InstallationProperties


class ProjectUpdatedEvent(OpencodeModel):
    type: Literal["project.updated"] = "project.updated"
    properties: ProjectUpdatedProperties


class ServerInstanceDisposedEvent(OpencodeModel):
    type: Literal["server.instance.disposed"] = "server.instance.disposed"
    properties: ServerInstanceDisposedProperties


class ServerConnectedEvent(OpencodeModel):
    """First event on every connection."""

    type: Literal["server.connected"] = "server.connected"
    properties: EmptyProperties = Field(default_factory=EmptyProperties)


class GlobalDisposedEvent(OpencodeModel):
    type: Literal["global.disposed"] = "global.disposed"
    properties: EmptyProperties = Field(default_factory=EmptyProperties)


class LspClientDiagnosticsEvent(OpencodeModel):
    type: Literal["lsp.client.diagnostics"] = "lsp.client.diagnostics"
    properties: LspClientDiagnosticsProperties


class LspUpdatedEvent(OpencodeModel):
    type: Literal["lsp.updated"] = "lsp.updated"
    properties: EmptyProperties = Field(default_factory=EmptyProperties)


class FileEditedEvent(OpencodeModel):
    type: Literal["file.edited"] = "file.edited"
    properties: FileEditedProperties


class FileWatcherUpdatedEvent(OpencodeModel):
    type: Literal["file.watcher.updated"] = "file.watcher.updated"
    properties: FileWatcherUpdatedProperties


class MessageUpdatedEvent(OpencodeModel):
    type: Literal["message.updated"] = "message.updated"
    properties: MessageUpdatedProperties


class MessageRemovedEvent(OpencodeModel):
    type: Literal["message.removed"] = "message.removed"
    properties: MessageRemovedProperties


class MessagePartUpdatedEvent(OpencodeModel):
    type: Literal["message.part.updated"] = "message.part.updated"
    properties: MessagePartUpdatedProperties


class MessagePartDeltaEvent(OpencodeModel):
    type: Literal["message.part.delta"] = "message.part.delta"
    properties: MessagePartDeltaProperties


class MessagePartRemovedEvent(OpencodeModel):
    type: Literal["message.part.removed"] = "message.part.removed"
    properties: MessagePartRemovedProperties


class PermissionAskedEvent(OpencodeModel):
    type: Literal["permission.asked"] = "permission.asked"
    properties: JsonValue = None


class PermissionRepliedEvent(OpencodeModel):
    type: Literal["permission.replied"] = "permission.replied"
    properties: PermissionRepliedProperties


class SessionCreatedEvent(OpencodeModel):
    type: Literal["session.created"] = "session.created"
    properties: SessionInfoProperties


class SessionUpdatedEvent(OpencodeModel):
    type: Literal["session.updated"] = "session.updated"
    properties: SessionInfoProperties


class SessionDeletedEvent(OpencodeModel):
    type: Literal["session.deleted"] = "session.deleted"
    properties: SessionInfoProperties


class SessionStatusEvent(OpencodeModel):
    type: Literal["session.status"] = "session.status"
    properties: SessionStatusProperties


class SessionIdleEvent(OpencodeModel):
    type: Literal["session.idle"] = "session.idle"
    properties: SessionIdProperties


class SessionDiffEvent(OpencodeModel):
    type: Literal["session.diff"] = "session.diff"
    properties: SessionDiffProperties


class SessionCompactedEvent(OpencodeModel):
    type: Literal["session.compacted"] = "session.compacted"
    properties: SessionIdProperties


class SessionErrorEvent(OpencodeModel):
    type: Literal["session.error"] = "session.error"
    properties: SessionErrorProperties


class QuestionAskedEvent(OpencodeModel):
    type: Literal["question.asked"] = "question.asked"
    properties: JsonValue = None


class QuestionRepliedEvent(OpencodeModel):
    type: Literal["question.replied"] = "question.replied"
    properties: QuestionRepliedProperties


class QuestionRejectedEvent(OpencodeModel):
    type: Literal["question.rejected"] = "question.rejected"
    properties: QuestionRejectedProperties


class TodoUpdatedEvent(OpencodeModel):
    type: Literal["todo.updated"] = "todo.updated"
    properties: TodoUpdatedProperties


class TuiPromptAppendEvent(OpencodeModel):
    type: Literal["tui.prompt.append"] = "tui.prompt.append"
    properties: TuiPromptAppendProperties


class TuiCommandExecuteEvent(OpencodeModel):
    type: Literal["tui.command.execute"] = "tui.command.execute"
    properties: TuiCommandExecuteProperties


class TuiToastShowEvent(OpencodeModel):
    type: Literal["tui.toast.show"] = "tui.toast.show"
    properties: TuiToastShowProperties


class TuiSessionSelectEvent(OpencodeModel):
    type: Literal["tui.session.select"] = "tui.session.select"
    properties: SessionIdProperties


class McpToolsChangedEvent(OpencodeModel):
    type: Literal["mcp.tools.changed"] = "mcp.tools.changed"
    properties: McpToolsChangedProperties


class McpBrowserOpenFailedEvent(OpencodeModel):
    type: Literal["mcp.browser.open.failed"] = "mcp.browser.open.failed"
    properties: McpBrowserOpenFailedProperties


class CommandExecutedEvent(OpencodeModel):
    type: Literal["command.executed"] = "command.executed"
    properties: CommandExecutedProperties


class VcsBranchUpdatedEvent(OpencodeModel):
    type: Literal["vcs.branch.updated"] = "vcs.branch.updated"
    properties: VcsBranchUpdatedProperties


class PtyCreatedEvent(OpencodeModel):
    type: Literal["pty.created"] = "pty.created"
    properties: PtyInfoProperties


class PtyUpdatedEvent(OpencodeModel):
    type: Literal["pty.updated"] = "pty.updated"
    properties: PtyInfoProperties


class PtyExitedEvent(OpencodeModel):
    type: Literal["pty.exited"] = "pty.exited"
    properties: PtyExitedProperties


class PtyDeletedEvent(OpencodeModel):
    type: Literal["pty.deleted"] = "pty.deleted"
    properties: PtyDeletedProperties


class WorktreeReadyEvent(OpencodeModel):
    type: Literal["worktree.ready"] = "worktree.ready"
    properties: WorktreeReadyProperties


class WorktreeFailedEvent(OpencodeModel):
    type: Literal["worktree.failed"] = "worktree.failed"
    properties: WorktreeFailedProperties


EventListResponse = Annotated[
    InstallationUpdatedEvent
    | InstallationUpdateAvailableEvent
    | ProjectUpdatedEvent
    | ServerInstanceDisposedEvent
    | ServerConnectedEvent
    | GlobalDisposedEvent
    | LspClientDiagnosticsEvent
    | LspUpdatedEvent
    | FileEditedEvent
    | FileWatcherUpdatedEvent
    | MessageUpdatedEvent
    | MessageRemovedEvent
    | MessagePartUpdatedEvent
    | MessagePartDeltaEvent
    | MessagePartRemovedEvent
    | PermissionAskedEvent
    | PermissionRepliedEvent
    | SessionCreatedEvent
    | SessionUpdatedEvent
    | SessionDeletedEvent
    | SessionStatusEvent
    | SessionIdleEvent
    | SessionDiffEvent
    | SessionCompactedEvent
    | SessionErrorEvent
    | QuestionAskedEvent
    | QuestionRepliedEvent
    | QuestionRejectedEvent
    | TodoUpdatedEvent
    | TuiPromptAppendEvent
    | TuiCommandExecuteEvent
    | TuiToastShowEvent
    | TuiSessionSelectEvent
    | McpToolsChangedEvent
    | McpBrowserOpenFailedEvent
    | CommandExecutedEvent
    | VcsBranchUpdatedEvent
    | PtyCreatedEvent
    | PtyUpdatedEvent
    | PtyExitedEvent
    | PtyDeletedEvent
    | WorktreeReadyEvent
    | WorktreeFailedEvent,
    Field(discriminator="type"),
]
"""Any event of the ``/event`` feed, selected by its ``type`` field."""


__all__ = [
    "CommandExecutedEvent",
    "EmptyProperties",
    "EventListResponse",
    "FileEditedEvent",
    "FileWatcherUpdatedEvent",
    "GlobalDisposedEvent",
    "InstallationUpdateAvailableEvent",
    "InstallationUpdatedEvent",
    "LspClientDiagnosticsEvent",
    "LspUpdatedEvent",
    "McpBrowserOpenFailedEvent",
    "McpToolsChangedEvent",
    "MessagePartDeltaEvent",
    "MessagePartRemovedEvent",
    "MessagePartUpdatedEvent",
    "MessageRemovedEvent",
    "MessageUpdatedEvent",
    "PermissionAskedEvent",
    "PermissionRepliedEvent",
    "ProjectUpdatedEvent",
    "Pty",
    "PtyCreatedEvent",
    "PtyDeletedEvent",
    "PtyExitedEvent",
    "PtyUpdatedEvent",
    "QuestionAskedEvent",
    "QuestionRejectedEvent",
    "QuestionRepliedEvent",
    "ServerConnectedEvent",
    "ServerInstanceDisposedEvent",
    "SessionCompactedEvent",
    "SessionCreatedEvent",
    "SessionDeletedEvent",
    "SessionDiffEvent",
    "SessionErrorEvent",
    "SessionIdleEvent",
    "SessionStatusEvent",
    "SessionUpdatedEvent",
    "Todo",
    "TodoUpdatedEvent",
    "TuiCommandExecuteEvent",
    "TuiPromptAppendEvent",
    "TuiSessionSelectEvent",
    "TuiToastShowEvent",
    "VcsBranchUpdatedEvent",
    "WorktreeFailedEvent",
    "WorktreeReadyEvent",
]
