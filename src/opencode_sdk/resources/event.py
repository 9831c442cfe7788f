# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Event feed endpoint."""

from __future__ import annotations

from ..config import RequestOptions
from ..streaming.stream import SSEStream
from ..types.event import EventListResponse
from .base import BaseResource


class EventResource(BaseResource):
    async def list(
        self, *, options: RequestOptions | None = None
    ) -> SSEStream[EventListResponse]:
        """
        Subscribe to the server event feed.

        The returned stream yields one typed event per SSE frame until the
        server closes the connection. Use it as an async context manager so
        the connection is released on early exit.
        """
        return await self._client.get_stream(
            "/event", cast_to=EventListResponse, options=options
        )


__all__ = ["EventResource"]
