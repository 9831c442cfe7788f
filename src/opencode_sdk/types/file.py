# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""File tree, file content and working-tree status models."""

from typing import Literal

from pydantic import Field

from .base import OpencodeModel


class FileInfo(OpencodeModel):
    """One changed file in the working tree, with line counts."""

    added: int
    path: str
    removed: int
    status: Literal["added", "deleted", "modified"]


class FileNode(OpencodeModel):
    """One entry of a directory listing."""

    name: str
    path: str
    absolute: str
    type: Literal["file", "directory"]
    ignored: bool


class FilePatchHunk(OpencodeModel):
    old_start: float = Field(alias="oldStart")
    old_lines: float = Field(alias="oldLines")
    new_start: float = Field(alias="newStart")
    new_lines: float = Field(alias="newLines")
    lines: list[str]


class FilePatch(OpencodeModel):
    old_file_name: str = Field(alias="oldFileName")
    new_file_name: str = Field(alias="newFileName")
    old_header: str | None = Field(default=None, alias="oldHeader")
    new_header: str | None = Field(default=None, alias="newHeader")
    hunks: list[FilePatchHunk]
    index: str | None = None


class FileContent(OpencodeModel):
    """
    Content of a file as returned by ``GET /file/content``.

    Binary files carry their content encoded as described by ``encoding``.
    Files with uncommitted changes also carry a diff and a structured patch.
    """

    type: Literal["text", "binary"]
    content: str
    diff: str | None = None
    patch: FilePatch | None = None
    encoding: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")


__all__ = [
    "FileContent",
    "FileInfo",
    "FileNode",
    "FilePatch",
    "FilePatchHunk",
]
