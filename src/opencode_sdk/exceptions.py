# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the OpenCode SDK.

This module defines the error taxonomy used throughout the library.
All exceptions inherit from OpencodeError, making it easy to catch
any SDK failure with a single except clause. Each error knows whether
it is worth retrying, which is what the request engine consults between
attempts.

Kinds:
    - APIError (and one subclass per well-known status): the server answered
      with a non-2xx status.
    - APIConnectionError: the connection failed before a response arrived.
    - APITimeoutError: the request did not complete in time.
    - UserAbortError: the caller abandoned the request.
    - SerializationError: a JSON payload could not be encoded or decoded.
    - HTTPTransportError: any other transport failure.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

# Statuses that are worth retrying when the server gives no explicit hint.
RETRYABLE_STATUSES = frozenset({408, 409, 429})


class OpencodeError(Exception):
    """Base exception for all OpenCode SDK errors.

    Example:
        try:
            session = await client.session.create()
        except OpencodeError as e:
            logger.error(f"OpenCode request failed: {e}")
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @property
    def status(self) -> int | None:
        """HTTP status code, or None for errors without a response."""
        return None

    @property
    def is_retryable(self) -> bool:
        """Whether the request engine may retry after this error."""
        return False

    @property
    def is_timeout(self) -> bool:
        """Whether this error represents a timeout."""
        return False

    @classmethod
    def from_response(
        cls,
        status: int,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> APIError:
        """Create an error from an HTTP response. See error_from_response()."""
        return error_from_response(status, headers, body)


class APIError(OpencodeError):
    """Raised when the server answers with a non-2xx status.

    Attributes:
        status: The HTTP status code.
        message: Message taken from the response body (or a placeholder).
        headers: Response headers, if available.
        body: Parsed JSON body, if the body was valid JSON.

    Example:
        try:
            await client.session.delete("ses_123")
        except APIError as e:
            if e.status == 404:
                logger.info("Session already gone")
            else:
                raise
    """

    def __init__(
        self,
        status: int,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(message)
        self._status = status
        self.headers = headers
        self.body = body

    def __str__(self) -> str:
        return f"{self._status} {self.message}"

    @property
    def status(self) -> int:
        return self._status

    @property
    def is_retryable(self) -> bool:
        return self._status in RETRYABLE_STATUSES or self._status >= 500


class BadRequestError(APIError):
    """400 Bad Request."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(400, message, headers, body)


class AuthenticationError(APIError):
    """401 Unauthorized."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(401, message, headers, body)


class PermissionDeniedError(APIError):
    """403 Forbidden."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(403, message, headers, body)


class NotFoundError(APIError):
    """404 Not Found."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(404, message, headers, body)


class ConflictError(APIError):
    """409 Conflict. Retryable by default."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(409, message, headers, body)


class UnprocessableEntityError(APIError):
    """422 Unprocessable Entity."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(422, message, headers, body)


class RateLimitError(APIError):
    """429 Too Many Requests. Retryable by default."""

    def __init__(
        self,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        super().__init__(429, message, headers, body)


class InternalServerError(APIError):
    """Any 5xx status. Retryable by default.

    Raises:
        ValueError: If status is below 500.
    """

    def __init__(
        self,
        status: int,
        message: str,
        headers: Mapping[str, str] | None = None,
        body: Any | None = None,
    ) -> None:
        if status < 500:
            raise ValueError(f"InternalServerError expects status >= 500, got {status}")
        super().__init__(status, message, headers, body)


class APIConnectionError(OpencodeError):
    """Raised when the connection fails before a response is received.

    Covers DNS, TCP and TLS failures while connecting. An event stream also
    raises it when its byte stream drops mid-body. The underlying transport
    exception is chained as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"Connection error: {self.message}"

    @property
    def is_retryable(self) -> bool:
        return True


class APITimeoutError(OpencodeError):
    """Raised when a request does not complete within its timeout."""

    def __init__(self, message: str = "Request timed out.") -> None:
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        return True

    @property
    def is_timeout(self) -> bool:
        return True


class UserAbortError(OpencodeError):
    """Raised when the caller abandons a request. Never retried."""

    def __init__(self, message: str = "Request was aborted.") -> None:
        super().__init__(message)


class SerializationError(OpencodeError):
    """Raised when a JSON payload cannot be encoded or decoded. Never retried."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"Serialization error: {self.message}"


class HTTPTransportError(OpencodeError):
    """Raised for transport failures that are neither timeouts nor connect errors.

    Includes read, write and close failures on an established connection.
    Never retried.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"HTTP error: {self.message}"


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def _message_from_body(status: int, body: Any | None) -> str:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
    if body is None:
        return f"{status} status code (no body)"
    return json.dumps(body, separators=(",", ":"))


def error_from_response(
    status: int,
    headers: Mapping[str, str] | None = None,
    body: Any | None = None,
) -> APIError:
    """Map an HTTP error response to the matching APIError subclass.

    The message comes from a string ``message`` field in the JSON body when
    present, otherwise from the whole body serialized as JSON, otherwise from
    a placeholder naming the status code.

    Args:
        status: HTTP status code.
        headers: Response headers, preserved on the error.
        body: Parsed JSON body, or None if the body was empty or not JSON.

    Returns:
        A status-specific subclass for 400, 401, 403, 404, 409, 422, 429 and
        5xx, or a plain APIError for anything else.
    """
    message = _message_from_body(status, body)
    if status >= 500:
        return InternalServerError(status, message, headers, body)
    error_cls = _STATUS_ERRORS.get(status)
    if error_cls is not None:
        return error_cls(message, headers, body)
    return APIError(status, message, headers, body)


__all__ = [
    "RETRYABLE_STATUSES",
    "APIConnectionError",
    "APIError",
    "APITimeoutError",
    "AuthenticationError",
    "BadRequestError",
    "ConflictError",
    "HTTPTransportError",
    "InternalServerError",
    "NotFoundError",
    "OpencodeError",
    "PermissionDeniedError",
    "RateLimitError",
    "SerializationError",
    "UnprocessableEntityError",
    "UserAbortError",
    "error_from_response",
]
