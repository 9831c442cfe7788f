# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Retry policy for the request engine.

This module holds the pieces of the retry loop that do not touch the
transport: the per-call attempt counter, the retry decision, the delay
between attempts and the mapping of httpx failures onto the error
taxonomy.

Delay order of precedence:
    1. ``retry-after-ms`` header (integer milliseconds)
    2. ``retry-after`` header (seconds, fractional allowed)
    3. Exponential backoff: min(0.5 * 2**attempt, 8.0) scaled by a jitter
       factor in [0.75, 1.0)
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from .exceptions import (
    APIConnectionError,
    APITimeoutError,
    HTTPTransportError,
    OpencodeError,
)

logger = logging.getLogger(__name__)

INITIAL_RETRY_DELAY = 0.5
"""Backoff for the first retry, in seconds."""

MAX_RETRY_DELAY = 8.0
"""Upper bound for computed backoff, in seconds."""

RETRY_COUNT_HEADER = "x-retry-count"
SHOULD_RETRY_HEADER = "x-should-retry"
RETRY_AFTER_MS_HEADER = "retry-after-ms"
RETRY_AFTER_HEADER = "retry-after"


@dataclass
class RetryContext:
    """
    Attempt bookkeeping for one logical request.

    Attempts run from 0 through max_retries inclusive, so max_retries=2
    allows three tries. Created per call and discarded when it resolves.
    """

    max_retries: int
    attempt: int = 0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")

    @property
    def can_retry(self) -> bool:
        """Whether another attempt is allowed after the current one."""
        return self.attempt < self.max_retries

    @property
    def is_retry(self) -> bool:
        return self.attempt > 0

    def advance(self) -> None:
        """Move to the next attempt."""
        self.attempt += 1


def _lower_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    return {k.lower(): v for k, v in headers.items()}


def should_retry(error: OpencodeError, headers: Mapping[str, str] | None = None) -> bool:
    """
    Decide whether a failed attempt is worth retrying.

    An explicit ``x-should-retry: true|false`` response header is honored
    exactly; otherwise the error kind decides (see OpencodeError.is_retryable).
    """
    hint = _lower_headers(headers).get(SHOULD_RETRY_HEADER)
    if hint == "true":
        return True
    if hint == "false":
        return False
    return error.is_retryable


def jitter_factor() -> float:
    """Random multiplier in [0.75, 1.0) spreading out concurrent retries."""
    return 0.75 + 0.25 * random.random()  # noqa: S311  # nosec B311


def _parse_retry_after_ms(value: str) -> float | None:
    digits = value.strip()
    # Plain unsigned integer only; int() would also take signs and underscores
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits) / 1000.0


def _parse_retry_after(value: str) -> float | None:
    try:
        seconds = float(value.strip())
    except ValueError:
        # HTTP-date form is not supported
        return None
    if seconds < 0 or not math.isfinite(seconds):
        return None
    return seconds


def retry_delay(attempt: int, headers: Mapping[str, str] | None = None) -> float:
    """
    Seconds to wait before the attempt following ``attempt``.

    Args:
        attempt: Zero-based number of the attempt that just failed
        headers: Response headers of that attempt, if a response arrived

    Returns:
        The server-requested delay when a retry header parses, otherwise
        capped exponential backoff with jitter
    """
    lowered = _lower_headers(headers)

    if RETRY_AFTER_MS_HEADER in lowered:
        delay = _parse_retry_after_ms(lowered[RETRY_AFTER_MS_HEADER])
        if delay is not None:
            return delay
        logger.debug(
            f"Ignoring malformed {RETRY_AFTER_MS_HEADER} header: "
            f"{lowered[RETRY_AFTER_MS_HEADER]!r}"
        )

    if RETRY_AFTER_HEADER in lowered:
        delay = _parse_retry_after(lowered[RETRY_AFTER_HEADER])
        if delay is not None:
            return delay
        logger.debug(
            f"Ignoring malformed {RETRY_AFTER_HEADER} header: "
            f"{lowered[RETRY_AFTER_HEADER]!r}"
        )

    base = min(INITIAL_RETRY_DELAY * (2 ** max(attempt, 0)), MAX_RETRY_DELAY)
    return base * jitter_factor()


def classify_transport_error(error: httpx.HTTPError) -> OpencodeError:
    """
    Map a failure raised by httpx while sending a request.

    Timeouts become APITimeoutError and connect failures APIConnectionError.
    Read, write and close failures may follow a request the server already
    received, so they become the non-retryable HTTPTransportError.
    """
    if isinstance(error, httpx.TimeoutException):
        return APITimeoutError()
    if isinstance(error, httpx.ConnectError):
        return APIConnectionError(str(error) or type(error).__name__)
    return HTTPTransportError(str(error) or type(error).__name__)


__all__ = [
    "INITIAL_RETRY_DELAY",
    "MAX_RETRY_DELAY",
    "RETRY_AFTER_HEADER",
    "RETRY_AFTER_MS_HEADER",
    "RETRY_COUNT_HEADER",
    "SHOULD_RETRY_HEADER",
    "RetryContext",
    "classify_transport_error",
    "jitter_factor",
    "retry_delay",
    "should_retry",
]
