# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""App endpoints: project info, initialization, logging, modes and providers."""

from __future__ import annotations

from ..config import RequestOptions
from ..types.app import App, AppLogParams, AppProvidersResponse, Mode
from .base import BaseResource


class AppResource(BaseResource):
    async def get(self, *, options: RequestOptions | None = None) -> App:
        """Return information about the current project."""
        return await self._client.get("/app", options=options, cast_to=App)

    async def init(self, *, options: RequestOptions | None = None) -> bool:
        """Initialize the project on the server."""
        return await self._client.post("/app/init", options=options, cast_to=bool)

    async def log(
        self, params: AppLogParams, *, options: RequestOptions | None = None
    ) -> bool:
        """Write a line to the server log."""
        return await self._client.post(
            "/log", body=params, options=options, cast_to=bool
        )

    async def modes(self, *, options: RequestOptions | None = None) -> list[Mode]:
        return await self._client.get("/mode", options=options, cast_to=list[Mode])

    async def providers(
        self, *, options: RequestOptions | None = None
    ) -> AppProvidersResponse:
        """List configured providers and the default model of each."""
        return await self._client.get(
            "/config/providers", options=options, cast_to=AppProvidersResponse
        )


__all__ = ["AppResource"]
