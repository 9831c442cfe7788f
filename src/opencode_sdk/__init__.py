# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""OpenCode SDK - Async Python client for the OpenCode server API.

This library provides typed bindings for the session, file, config and
event endpoints of an opencode server, with automatic retries and a
Server-Sent Events stream for the live event feed.

Key Features:
    - Async client on httpx with bounded retries, exponential backoff with
      jitter, and honoring of retry-after / x-should-retry headers
    - Structured error taxonomy (status errors, timeouts, connection errors)
    - Incremental SSE decoder and typed async event stream
    - pydantic models for every request and response
    - Optional Prometheus metrics

Quick Start:
    >>> from opencode_sdk import Opencode
    >>> from opencode_sdk.types import SessionChatParams, TextPartInput
    >>>
    >>> async with Opencode() as client:
    ...     session = await client.session.create()
    ...     reply = await client.session.chat(
    ...         session.id,
    ...         SessionChatParams(
    ...             model_id="claude-sonnet-4",
    ...             provider_id="anthropic",
    ...             parts=[TextPartInput(text="Hello")],
    ...         ),
    ...     )

Main Exports:
    - Opencode: The client
    - ClientOptions, RequestOptions: Configuration
    - OpencodeError and subclasses: Errors
    - SSEDecoder, SSEStream, ServerSentEvent: Streaming primitives

Note: Prometheus export requires the 'prometheus' extra. Install with:
    pip install opencode-sdk[prometheus]
"""

from ._version import __version__
from .client import Opencode
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientOptions,
    RequestOptions,
)
from .exceptions import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    HTTPTransportError,
    InternalServerError,
    NotFoundError,
    OpencodeError,
    PermissionDeniedError,
    RateLimitError,
    SerializationError,
    UnprocessableEntityError,
    UserAbortError,
)
from .protocols import ClientProtocol, ClosableResponseProtocol
from .streaming import ServerSentEvent, SSEDecoder, SSEStream

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    # Errors
    "APIConnectionError",
    "APIError",
    "APITimeoutError",
    "AuthenticationError",
    "BadRequestError",
    # Configuration
    "ClientOptions",
    # Protocols
    "ClientProtocol",
    "ClosableResponseProtocol",
    "ConflictError",
    "HTTPTransportError",
    "InternalServerError",
    "NotFoundError",
    # Client
    "Opencode",
    "OpencodeError",
    "PermissionDeniedError",
    "RateLimitError",
    "RequestOptions",
    # Streaming
    "SSEDecoder",
    "SSEStream",
    "SerializationError",
    "ServerSentEvent",
    "UnprocessableEntityError",
    "UserAbortError",
    "__version__",
]
