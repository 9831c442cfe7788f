# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Terminal UI control endpoints."""

from __future__ import annotations

from ..config import RequestOptions
from ..types.tui import TuiAppendPromptParams
from .base import BaseResource


class TuiResource(BaseResource):
    async def append_prompt(
        self, text: str, *, options: RequestOptions | None = None
    ) -> bool:
        """Append text to the prompt of the attached terminal UI."""
        return await self._client.post(
            "/tui/append-prompt",
            body=TuiAppendPromptParams(text=text),
            options=options,
            cast_to=bool,
        )

    async def open_help(self, *, options: RequestOptions | None = None) -> bool:
        return await self._client.post("/tui/open-help", options=options, cast_to=bool)


__all__ = ["TuiResource"]
