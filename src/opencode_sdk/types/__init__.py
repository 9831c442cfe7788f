# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request and response models for the OpenCode API."""

from .app import (
    App,
    AppLogParams,
    AppPath,
    AppProvidersResponse,
    AppTime,
    LogLevel,
    Mode,
    ModeModel,
    Model,
    ModelCost,
    ModelLimit,
    Provider,
)
from .base import OpencodeModel
from .config import (
    AgentConfig,
    Config,
    McpConfig,
    McpLocalConfig,
    McpRemoteConfig,
    ModeConfig,
    ProviderConfig,
)
from .event import (
    EventListResponse,
    MessagePartDeltaEvent,
    MessagePartUpdatedEvent,
    MessageUpdatedEvent,
    ServerConnectedEvent,
    SessionErrorEvent,
    SessionIdleEvent,
)
from .file import FileContent, FileInfo, FileNode, FilePatch, FilePatchHunk
from .find import FindTextResponseItem, SymbolInfo
from .session import (
    AssistantMessage,
    FilePart,
    FilePartInput,
    FilePartSource,
    Message,
    Part,
    PartInput,
    PatchPart,
    Session,
    SessionChatParams,
    SessionInitParams,
    SessionMessagesResponseItem,
    SessionRevertParams,
    SessionSummarizeParams,
    SnapshotPart,
    StepFinishPart,
    StepStartPart,
    TextPart,
    TextPartInput,
    ToolPart,
    ToolState,
    UserMessage,
)
from .shared import (
    MessageAbortedError,
    MessageOutputLengthError,
    ProviderAuthError,
    SessionError,
    UnknownError,
)
from .tui import TuiAppendPromptParams

__all__ = [
    "AgentConfig",
    "App",
    "AppLogParams",
    "AppPath",
    "AppProvidersResponse",
    "AppTime",
    "AssistantMessage",
    "Config",
    "EventListResponse",
    "FileContent",
    "FileInfo",
    "FileNode",
    "FilePart",
    "FilePartInput",
    "FilePartSource",
    "FilePatch",
    "FilePatchHunk",
    "FindTextResponseItem",
    "LogLevel",
    "McpConfig",
    "McpLocalConfig",
    "McpRemoteConfig",
    "Message",
    "MessageAbortedError",
    "MessageOutputLengthError",
    "MessagePartDeltaEvent",
    "MessagePartUpdatedEvent",
    "MessageUpdatedEvent",
    "Mode",
    "ModeConfig",
    "ModeModel",
    "Model",
    "ModelCost",
    "ModelLimit",
    "OpencodeModel",
    "Part",
    "PartInput",
    "PatchPart",
    "Provider",
    "ProviderAuthError",
    "ProviderConfig",
    "ServerConnectedEvent",
    "Session",
    "SessionChatParams",
    "SessionError",
    "SessionErrorEvent",
    "SessionIdleEvent",
    "SessionInitParams",
    "SessionMessagesResponseItem",
    "SessionRevertParams",
    "SessionSummarizeParams",
    "SnapshotPart",
    "StepFinishPart",
    "StepStartPart",
    "SymbolInfo",
    "TextPart",
    "TextPartInput",
    "ToolPart",
    "ToolState",
    "TuiAppendPromptParams",
    "UnknownError",
    "UserMessage",
]
