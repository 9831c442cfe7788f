# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Session endpoints.

Sessions are conversations with the agent. ``chat`` sends a user message
and returns the assistant's reply once it is complete; follow progress
while it runs through the event feed (``client.event.list()``).
"""

from __future__ import annotations

import builtins

from ..config import RequestOptions
from ..types.session import (
    AssistantMessage,
    Session,
    SessionChatParams,
    SessionInitParams,
    SessionMessagesResponseItem,
    SessionRevertParams,
    SessionSummarizeParams,
)
from .base import BaseResource


class SessionResource(BaseResource):
    async def create(self, *, options: RequestOptions | None = None) -> Session:
        return await self._client.post("/session", options=options, cast_to=Session)

    async def list(
        self, *, options: RequestOptions | None = None
    ) -> builtins.list[Session]:
        return await self._client.get(
            "/session", options=options, cast_to=list[Session]
        )

    async def delete(self, id: str, *, options: RequestOptions | None = None) -> bool:
        return await self._client.delete(
            f"/session/{id}", options=options, cast_to=bool
        )

    async def abort(self, id: str, *, options: RequestOptions | None = None) -> bool:
        """Abort the assistant response currently being generated."""
        return await self._client.post(
            f"/session/{id}/abort", options=options, cast_to=bool
        )

    async def chat(
        self,
        id: str,
        params: SessionChatParams,
        *,
        options: RequestOptions | None = None,
    ) -> AssistantMessage:
        """Send a message and wait for the complete assistant reply."""
        return await self._client.post(
            f"/session/{id}/message",
            body=params,
            options=options,
            cast_to=AssistantMessage,
        )

    async def init(
        self,
        id: str,
        params: SessionInitParams,
        *,
        options: RequestOptions | None = None,
    ) -> bool:
        """Analyze the project and write an AGENTS.md file."""
        return await self._client.post(
            f"/session/{id}/init", body=params, options=options, cast_to=bool
        )

    async def messages(
        self, id: str, *, options: RequestOptions | None = None
    ) -> builtins.list[SessionMessagesResponseItem]:
        """Every message of the session with its parts, oldest first."""
        return await self._client.get(
            f"/session/{id}/message",
            options=options,
            cast_to=list[SessionMessagesResponseItem],
        )

    async def revert(
        self,
        id: str,
        params: SessionRevertParams,
        *,
        options: RequestOptions | None = None,
    ) -> Session:
        """Undo a message (and optionally one part) with its file changes."""
        return await self._client.post(
            f"/session/{id}/revert", body=params, options=options, cast_to=Session
        )

    async def share(self, id: str, *, options: RequestOptions | None = None) -> Session:
        return await self._client.post(
            f"/session/{id}/share", options=options, cast_to=Session
        )

    async def summarize(
        self,
        id: str,
        params: SessionSummarizeParams,
        *,
        options: RequestOptions | None = None,
    ) -> bool:
        return await self._client.post(
            f"/session/{id}/summarize", body=params, options=options, cast_to=bool
        )

    async def unrevert(
        self, id: str, *, options: RequestOptions | None = None
    ) -> Session:
        """Restore messages removed by a revert."""
        return await self._client.post(
            f"/session/{id}/unrevert", options=options, cast_to=Session
        )

    async def unshare(
        self, id: str, *, options: RequestOptions | None = None
    ) -> Session:
        return await self._client.delete(
            f"/session/{id}/share", options=options, cast_to=Session
        )


__all__ = ["SessionResource"]
