# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Async client for the OpenCode server API.

The Opencode class owns the transport (an ``httpx.AsyncClient``), builds
URLs and headers, and runs every call through one retrying request engine:

    for attempt in 0..max_retries:
        send the request
        2xx            -> validate the JSON body into the requested type
        transport fail -> retry timeouts and connection errors
        other status   -> retry 408/409/429/5xx unless x-should-retry says no
        sleep retry_delay(attempt, headers) between attempts

Streaming endpoints go through get_stream(), which makes a single attempt
and hands the open response to an SSEStream.

Example:
    async with Opencode() as client:
        session = await client.session.create()
        async with await client.event.list() as events:
            async for event in events:
                ...
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, TypeAdapter

from ._version import __version__
from .config import ClientOptions, RequestOptions
from .exceptions import (
    APIError,
    OpencodeError,
    SerializationError,
    error_from_response,
)
from .observability.collector import MetricsCollector, get_metrics_collector
from .observability.constants import (
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
)
from .retry import (
    RETRY_COUNT_HEADER,
    RetryContext,
    classify_transport_error,
    retry_delay,
    should_retry,
)
from .streaming.stream import SSEStream
from .types.base import OpencodeModel

if TYPE_CHECKING:
    from .resources import (
        AppResource,
        ConfigResource,
        EventResource,
        FileResource,
        FindResource,
        SessionResource,
        TuiResource,
    )

logger = logging.getLogger(__name__)

USER_AGENT = f"opencode-sdk-python/{__version__}"


@functools.lru_cache(maxsize=256)
def _type_adapter(cast_to: Any) -> TypeAdapter[Any]:
    return TypeAdapter(cast_to)


def _validate_json(content: bytes, cast_to: Any) -> Any:
    """Parse a success body; any decode or validation failure is a SerializationError."""
    try:
        if cast_to is None:
            return json.loads(content)
        return _type_adapter(cast_to).validate_json(content)
    except ValueError as e:
        raise SerializationError(str(e)) from e


def _json_or_none(content: bytes) -> Any | None:
    """Best-effort parse of an error body."""
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        return None


def _encode_body(body: Any) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, OpencodeModel):
        body = body.to_body()
    elif isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        return json.dumps(body, separators=(",", ":")).encode()
    except (TypeError, ValueError) as e:
        raise SerializationError(f"request body is not JSON serializable: {e}") from e


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _retry_reason(error: OpencodeError) -> str:
    if error.status is not None:
        return str(error.status)
    if error.is_timeout:
        return "timeout"
    return "connection"


class Opencode:
    """
    Client for an OpenCode server.

    Construct with keyword arguments or from a ClientOptions via
    with_options(). With no arguments the base URL comes from
    ``OPENCODE_BASE_URL`` and falls back to ``http://localhost:54321``.

    Args:
        base_url: Server base URL
        timeout: Request timeout in seconds
        max_retries: Retries after the first attempt
        default_headers: Headers sent with every request
        default_query: Query parameters sent with every request
        http_client: An httpx.AsyncClient to use instead of an owned one;
            the caller keeps responsibility for closing it
        metrics: Collector to record into; defaults to the process-wide one
            unless metrics are disabled in the options
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        default_headers: Mapping[str, str] | None = None,
        default_query: Mapping[str, Any] | None = None,
        options: ClientOptions | None = None,
        http_client: httpx.AsyncClient | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        if options is None:
            options = ClientOptions(
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
                default_headers=dict(default_headers) if default_headers else None,
                default_query=dict(default_query) if default_query else None,
            )
        elif any(
            v is not None
            for v in (base_url, timeout, max_retries, default_headers, default_query)
        ):
            raise ValueError("Pass either options or individual settings, not both")

        self._options = options
        self._base_url = options.resolve_base_url()
        self._timeout = options.resolve_timeout()
        self._max_retries = options.resolve_max_retries()
        self._default_headers = dict(options.default_headers or {})
        self._default_query = dict(options.default_query or {})

        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient()

        if metrics is None and options.metrics_enabled:
            metrics = get_metrics_collector()
        self._metrics = metrics

        logger.debug(
            f"Opencode client created (base_url={self._base_url}, "
            f"timeout={self._timeout}s, max_retries={self._max_retries})"
        )

    @classmethod
    def with_options(
        cls,
        options: ClientOptions,
        *,
        http_client: httpx.AsyncClient | None = None,
        metrics: MetricsCollector | None = None,
    ) -> Opencode:
        """Create a client from a ClientOptions."""
        return cls(options=options, http_client=http_client, metrics=metrics)

    # === Properties ===

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._default_headers)

    @property
    def default_query(self) -> dict[str, Any]:
        return dict(self._default_query)

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def metrics(self) -> MetricsCollector | None:
        return self._metrics

    # === Resources ===

    @functools.cached_property
    def app(self) -> AppResource:
        from .resources import AppResource

        return AppResource(self)

    @functools.cached_property
    def config(self) -> ConfigResource:
        from .resources import ConfigResource

        return ConfigResource(self)

    @functools.cached_property
    def event(self) -> EventResource:
        from .resources import EventResource

        return EventResource(self)

    @functools.cached_property
    def file(self) -> FileResource:
        from .resources import FileResource

        return FileResource(self)

    @functools.cached_property
    def find(self) -> FindResource:
        from .resources import FindResource

        return FindResource(self)

    @functools.cached_property
    def session(self) -> SessionResource:
        from .resources import SessionResource

        return SessionResource(self)

    @functools.cached_property
    def tui(self) -> TuiResource:
        from .resources import TuiResource

        return TuiResource(self)

    # === URL & header building ===

    def build_url(self, path: str, query: Mapping[str, Any] | None = None) -> str:
        """
        Join the base URL and path, then append the query string.

        Default query parameters are merged with ``query`` (per-call values
        win), None values are dropped and keys are sorted so the same call
        always produces the same URL.
        """
        base = self._base_url.rstrip("/")
        if not path.startswith("/"):
            path = f"/{path}"

        merged = {**self._default_query, **(query or {})}
        params: list[tuple[str, str]] = []
        for key in sorted(merged):
            value = merged[key]
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                params.extend((key, _query_value(v)) for v in value)
            else:
                params.append((key, _query_value(value)))

        if not params:
            return f"{base}{path}"
        return f"{base}{path}?{httpx.QueryParams(params)}"

    def build_headers(
        self,
        attempt: int = 0,
        extra_headers: Mapping[str, str] | None = None,
    ) -> httpx.Headers:
        """
        Headers for one attempt.

        Order, later wins: client defaults, Accept and User-Agent, the retry
        counter (attempts after the first only), per-call extra headers.
        """
        headers = httpx.Headers(self._default_headers)
        headers["Accept"] = "application/json"
        headers["User-Agent"] = USER_AGENT
        if attempt > 0:
            headers[RETRY_COUNT_HEADER] = str(attempt)
        for key, value in (extra_headers or {}).items():
            headers[key] = value
        return headers

    # === Request engine ===

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
    ) -> Any:
        """
        Perform one logical request, retrying transient failures.

        Raises:
            APIError: Non-2xx response that was not retried (or out of retries)
            APITimeoutError: The last attempt timed out
            APIConnectionError: The last attempt could not connect
            HTTPTransportError: Any other transport failure
            SerializationError: The body could not be encoded, or a 2xx body
                did not match ``cast_to``
        """
        opts = options or RequestOptions()
        ctx = RetryContext(
            max_retries=self._max_retries if opts.max_retries is None else opts.max_retries
        )
        timeout = self._timeout if opts.timeout is None else opts.timeout
        url = self.build_url(path, query)
        content = _encode_body(body)

        start = time.monotonic()
        outcome = "error"
        try:
            result = await self._send_with_retries(
                method, url, content, opts, ctx, timeout, cast_to
            )
            outcome = "success"
            return result
        finally:
            if self._metrics is not None:
                self._metrics.inc_counter(
                    REQUESTS_TOTAL, labels={"method": method, "outcome": outcome}
                )
                self._metrics.observe_histogram(
                    REQUEST_DURATION_SECONDS,
                    time.monotonic() - start,
                    labels={"method": method},
                )

    async def _send_with_retries(
        self,
        method: str,
        url: str,
        content: bytes | None,
        opts: RequestOptions,
        ctx: RetryContext,
        timeout: float,
        cast_to: Any,
    ) -> Any:
        while True:
            headers = self.build_headers(ctx.attempt, opts.extra_headers)
            if content is not None and "content-type" not in headers:
                headers["Content-Type"] = "application/json"

            logger.debug(
                f"Sending {method} {url} "
                f"(attempt {ctx.attempt + 1}/{ctx.max_retries + 1})"
            )

            try:
                response = await self._http.request(
                    method, url, headers=headers, content=content, timeout=timeout
                )
            except httpx.HTTPError as e:
                error = classify_transport_error(e)
                if ctx.can_retry and error.is_retryable:
                    await self._backoff(ctx, error, None)
                    continue
                logger.debug(f"{method} {url} failed: {error}")
                raise error from e

            if response.is_success:
                return _validate_json(response.content, cast_to)

            api_error: APIError = error_from_response(
                response.status_code, response.headers, _json_or_none(response.content)
            )
            if ctx.can_retry and should_retry(api_error, response.headers):
                await self._backoff(ctx, api_error, response.headers)
                continue
            if ctx.is_retry:
                logger.warning(
                    f"{method} {url} failed after {ctx.attempt + 1} attempts: {api_error}"
                )
            raise api_error

    async def _backoff(
        self,
        ctx: RetryContext,
        error: OpencodeError,
        headers: Mapping[str, str] | None,
    ) -> None:
        delay = retry_delay(ctx.attempt, headers)
        logger.debug(
            f"Retrying after error (attempt {ctx.attempt + 1}, "
            f"delay {delay:.3f}s): {error}"
        )
        if self._metrics is not None:
            self._metrics.inc_counter(
                REQUEST_RETRIES_TOTAL, labels={"reason": _retry_reason(error)}
            )
        await asyncio.sleep(delay)
        ctx.advance()

    # === Verb helpers ===

    async def get(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
    ) -> Any:
        return await self._request(
            "GET", path, query=query, options=options, cast_to=cast_to
        )

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
    ) -> Any:
        return await self._request(
            "POST", path, body=body, query=query, options=options, cast_to=cast_to
        )

    async def put(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
    ) -> Any:
        return await self._request(
            "PUT", path, body=body, query=query, options=options, cast_to=cast_to
        )

    async def patch(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
    ) -> Any:
        return await self._request(
            "PATCH", path, body=body, query=query, options=options, cast_to=cast_to
        )

    async def delete(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
    ) -> Any:
        return await self._request(
            "DELETE", path, body=body, query=query, options=options, cast_to=cast_to
        )

    async def get_stream(
        self,
        path: str,
        *,
        cast_to: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> SSEStream[Any]:
        """
        Open a Server-Sent Events stream. No retries are attempted.

        The connect, write and pool phases use the request timeout; reads
        have no timeout because an event feed may stay idle indefinitely.

        Raises:
            APIError: The server answered with a non-2xx status
            APITimeoutError, APIConnectionError, HTTPTransportError: The
                request failed before a response arrived
        """
        opts = options or RequestOptions()
        timeout = self._timeout if opts.timeout is None else opts.timeout
        url = self.build_url(path, query)
        headers = self.build_headers(0, opts.extra_headers)

        request = self._http.build_request(
            "GET", url, headers=headers, timeout=httpx.Timeout(timeout, read=None)
        )
        logger.debug(f"Opening event stream GET {url}")
        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as e:
            raise classify_transport_error(e) from e

        if not response.is_success:
            try:
                content = await response.aread()
            except httpx.HTTPError:
                content = b""
            finally:
                await response.aclose()
            raise error_from_response(
                response.status_code, response.headers, _json_or_none(content)
            )

        return SSEStream(
            response.aiter_bytes(), cast_to, response=response, metrics=self._metrics
        )

    # === Lifecycle ===

    async def close(self) -> None:
        """Close the owned HTTP client. An injected client is left open."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> Opencode:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return (
            f"Opencode(base_url={self._base_url!r}, timeout={self._timeout}, "
            f"max_retries={self._max_retries})"
        )


__all__ = ["USER_AGENT", "Opencode"]
