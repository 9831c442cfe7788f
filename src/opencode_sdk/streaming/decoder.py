# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Incremental Server-Sent Events decoder.

This module turns an append-only sequence of byte chunks into complete
ServerSentEvent frames. Chunk boundaries may fall anywhere: in the middle
of a line, between a CR and its LF, or inside a multi-byte UTF-8 sequence.
Feeding the same bytes in any chunking yields the same frames.

Wire format handled:
    ": comment"            ignored
    "field: value"         event, data and id are recognized; other fields ignored
    "field"                field with an empty value
    ""                     blank line, terminates the current frame

Both LF and CRLF line endings are accepted. Decoding never fails: invalid
UTF-8 is replaced with U+FFFD and malformed lines are treated leniently.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerSentEvent:
    """
    A single frame parsed from the SSE wire format.

    Attributes:
        event: Value of the last ``event:`` field seen in the frame, if any
        data: All ``data:`` values of the frame joined with newlines
        id: Value of the last ``id:`` field seen in the frame, if any
    """

    event: str | None = None
    data: str = ""
    id: str | None = None


class SSEDecoder:
    """
    Stateful line accumulator producing ServerSentEvent frames.

    One decoder serves exactly one stream. It holds the unterminated tail of
    the text seen so far plus the fields of the frame being built; nothing
    else is retained, so memory stays proportional to one partial line and
    one pending frame.

    Usage:
        decoder = SSEDecoder()
        for chunk in chunks:
            for frame in decoder.feed(chunk):
                handle(frame)
        last = decoder.flush()
        if last is not None:
            handle(last)
    """

    __slots__ = (
        "_buffer",
        "_data_lines",
        "_event",
        "_id",
        "_text_decoder",
    )

    def __init__(self) -> None:
        self._text_decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._event: str | None = None
        self._data_lines: list[str] = []
        self._id: str | None = None

    def feed(self, chunk: bytes) -> list[ServerSentEvent]:
        """
        Feed a chunk of bytes and return every frame it completes.

        Args:
            chunk: Raw bytes from the stream, possibly empty

        Returns:
            Frames in the order their terminating blank lines were seen
        """
        self._buffer += self._text_decoder.decode(chunk)
        if "\n" not in self._buffer:
            return []

        *lines, self._buffer = self._buffer.split("\n")

        frames: list[ServerSentEvent] = []
        for line in lines:
            frame = self._process_line(line.removesuffix("\r"))
            if frame is not None:
                frames.append(frame)
        return frames

    def flush(self) -> ServerSentEvent | None:
        """
        Finish the stream and return the final frame, if one is pending.

        Any unterminated trailing line is interpreted as one more line before
        the usual emission rule is applied. Call once, after the byte stream
        has ended.
        """
        self._buffer += self._text_decoder.decode(b"", final=True)
        if self._buffer:
            line = self._buffer.removesuffix("\r")
            self._buffer = ""
            frame = self._process_line(line)
            if frame is not None:
                return frame
        return self._emit()

    def _process_line(self, line: str) -> ServerSentEvent | None:
        """Apply one complete line; return a frame if the line terminated one."""
        if not line:
            return self._emit()

        if line.startswith(":"):
            return None

        field, sep, value = line.partition(":")
        if sep and value.startswith(" "):
            value = value[1:]

        if field == "event":
            self._event = value
        elif field == "data":
            self._data_lines.append(value)
        elif field == "id":
            self._id = value
        # Unknown fields are ignored
        return None

    def _emit(self) -> ServerSentEvent | None:
        """Build a frame from the pending fields and reset them."""
        if self._event is None and not self._data_lines and self._id is None:
            return None

        frame = ServerSentEvent(
            event=self._event,
            data="\n".join(self._data_lines),
            id=self._id,
        )
        self._event = None
        self._data_lines = []
        self._id = None
        return frame


__all__ = ["SSEDecoder", "ServerSentEvent"]
