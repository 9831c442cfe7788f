# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""File endpoints: read a file, list a directory, working-tree status."""

from __future__ import annotations

import builtins

from ..config import RequestOptions
from ..types.file import FileContent, FileInfo, FileNode
from .base import BaseResource


class FileResource(BaseResource):
    async def read(
        self, path: str, *, options: RequestOptions | None = None
    ) -> FileContent:
        return await self._client.get(
            "/file/content", query={"path": path}, options=options, cast_to=FileContent
        )

    async def list(
        self, path: str | None = None, *, options: RequestOptions | None = None
    ) -> builtins.list[FileNode]:
        """List a directory; the project root when ``path`` is omitted."""
        return await self._client.get(
            "/file", query={"path": path}, options=options, cast_to=list[FileNode]
        )

    async def status(
        self, *, options: RequestOptions | None = None
    ) -> builtins.list[FileInfo]:
        """Changed files in the working tree."""
        return await self._client.get(
            "/file/status", options=options, cast_to=list[FileInfo]
        )


__all__ = ["FileResource"]
