# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client Configuration for the OpenCode SDK

This module provides the client-level options (base URL, timeout, retry
bound, default headers and query parameters) and the per-request options
that override them for a single call.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_BASE_URL = "http://localhost:54321"
"""Base URL used when neither an argument nor the environment provides one."""

DEFAULT_TIMEOUT = 60.0
"""Request timeout in seconds."""

DEFAULT_MAX_RETRIES = 2
"""Retries after the first attempt (so three attempts in total)."""

BASE_URL_ENV_VAR = "OPENCODE_BASE_URL"
"""Environment variable consulted for the base URL."""


@dataclass
class ClientOptions:
    """
    Configuration for an Opencode client.

    Unset fields resolve to module defaults through the ``resolve_*``
    helpers, so an empty ClientOptions() talks to a local server.
    """

    base_url: str | None = None
    """Server base URL. Falls back to OPENCODE_BASE_URL, then DEFAULT_BASE_URL."""

    timeout: float | None = None
    """Request timeout in seconds."""

    max_retries: int | None = None
    """Maximum retries per logical request."""

    default_headers: dict[str, str] | None = None
    """Headers sent with every request. Per-call extra headers win on conflict."""

    default_query: dict[str, Any] | None = None
    """Query parameters sent with every request. Per-call values win on conflict."""

    metrics_enabled: bool = True
    """Record request and stream metrics into the process-wide collector."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries is not None and self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.base_url is not None and not self.base_url:
            raise ValueError("base_url must not be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientOptions":
        """
        Build options from the environment.

        Args:
            environ: Mapping to read instead of ``os.environ`` (tests)
        """
        env = os.environ if environ is None else environ
        return cls(base_url=env.get(BASE_URL_ENV_VAR) or None)

    def resolve_base_url(self) -> str:
        if self.base_url is not None:
            return self.base_url
        return os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL

    def resolve_timeout(self) -> float:
        return DEFAULT_TIMEOUT if self.timeout is None else self.timeout

    def resolve_max_retries(self) -> int:
        return DEFAULT_MAX_RETRIES if self.max_retries is None else self.max_retries


@dataclass
class RequestOptions:
    """
    Overrides for a single request.

    Every unset field falls back to the client-level value.
    """

    extra_headers: dict[str, str] = field(default_factory=dict)
    """Headers added to this request only. They win over every other header."""

    timeout: float | None = None
    """Timeout for this request in seconds."""

    max_retries: int | None = None
    """Retry bound for this request."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries is not None and self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")


__all__ = [
    "BASE_URL_ENV_VAR",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "ClientOptions",
    "RequestOptions",
]
