# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the client seam used by resource wrappers."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..config import RequestOptions
    from ..streaming.stream import SSEStream


@runtime_checkable
class ClientProtocol(Protocol):
    """
    Minimal protocol resource wrappers need from a client.

    Resources never touch the transport. They only call the generic verb
    helpers, which run the retrying request engine, and ``get_stream`` for
    event feeds. Any object with these methods can back a resource, which
    keeps resources testable with a mock.
    """

    @property
    def base_url(self) -> str:
        """Base URL requests are sent to."""
        ...

    async def get(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: "RequestOptions | None" = None,
        cast_to: Any = None,
    ) -> Any:
        """Issue a GET request."""
        ...

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: "RequestOptions | None" = None,
        cast_to: Any = None,
    ) -> Any:
        """Issue a POST request."""
        ...

    async def delete(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: "RequestOptions | None" = None,
        cast_to: Any = None,
    ) -> Any:
        """Issue a DELETE request."""
        ...

    async def get_stream(
        self,
        path: str,
        *,
        cast_to: Any = None,
        query: Mapping[str, Any] | None = None,
        options: "RequestOptions | None" = None,
    ) -> "SSEStream[Any]":
        """Open an SSE stream."""
        ...
