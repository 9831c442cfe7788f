# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Search result models for file, symbol and text search."""

from .base import OpencodeModel


class Position(OpencodeModel):
    character: int
    line: int


class Range(OpencodeModel):
    end: Position
    start: Position


class SymbolLocation(OpencodeModel):
    range: Range
    uri: str


class SymbolInfo(OpencodeModel):
    """A workspace symbol reported by the language server."""

    kind: int
    location: SymbolLocation
    name: str


class TextMatch(OpencodeModel):
    text: str


class Submatch(OpencodeModel):
    end: int
    match: TextMatch
    start: int


class Lines(OpencodeModel):
    text: str


class PathInfo(OpencodeModel):
    text: str


class FindTextResponseItem(OpencodeModel):
    """One matching line from a ripgrep-style text search."""

    absolute_offset: int
    line_number: int
    lines: Lines
    path: PathInfo
    submatches: list[Submatch]


__all__ = [
    "FindTextResponseItem",
    "Lines",
    "PathInfo",
    "Position",
    "Range",
    "Submatch",
    "SymbolInfo",
    "SymbolLocation",
    "TextMatch",
]
