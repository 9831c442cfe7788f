# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the resource that owns a raw byte stream."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClosableResponseProtocol(Protocol):
    """
    Protocol for the object behind an SSE byte stream.

    SSEStream closes it when the stream ends or is released, which returns
    the connection to the transport. ``httpx.Response`` satisfies it.
    """

    async def aclose(self) -> None:
        """Release the underlying connection."""
        ...
