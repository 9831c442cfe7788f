# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Server-Sent Events support.

This module provides:
- ServerSentEvent: one frame of the SSE wire format
- SSEDecoder: incremental bytes-to-frames decoder
- SSEStream: typed async iterator over an SSE byte stream

Example:
    async with await client.event.list() as stream:
        async for event in stream:
            print(event.type)
"""

from .decoder import ServerSentEvent, SSEDecoder
from .stream import SSEStream

__all__ = [
    "SSEDecoder",
    "SSEStream",
    "ServerSentEvent",
]
