# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Search endpoints."""

from __future__ import annotations

from ..config import RequestOptions
from ..types.find import FindTextResponseItem, SymbolInfo
from .base import BaseResource


class FindResource(BaseResource):
    async def files(
        self, query: str, *, options: RequestOptions | None = None
    ) -> list[str]:
        """Find files whose path matches ``query``."""
        return await self._client.get(
            "/find/file", query={"query": query}, options=options, cast_to=list[str]
        )

    async def symbols(
        self, query: str, *, options: RequestOptions | None = None
    ) -> list[SymbolInfo]:
        """Find workspace symbols matching ``query``."""
        return await self._client.get(
            "/find/symbol",
            query={"query": query},
            options=options,
            cast_to=list[SymbolInfo],
        )

    async def text(
        self, pattern: str, *, options: RequestOptions | None = None
    ) -> list[FindTextResponseItem]:
        """Search file contents for ``pattern``."""
        return await self._client.get(
            "/find",
            query={"pattern": pattern},
            options=options,
            cast_to=list[FindTextResponseItem],
        )


__all__ = ["FindResource"]
