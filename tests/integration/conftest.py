"""
Fixtures for end-to-end tests against a scripted server.

The server is an ``httpx.MockTransport`` whose handler pops one scripted
reply per request, so each test states exactly what the server answers on
every attempt. Backoff sleeps are patched out.

Example:
    @pytest.mark.asyncio
    async def test_retry(scripted_server, make_client):
        scripted_server.replies = [httpx.Response(429), httpx.Response(200, json=True)]
        client = make_client(scripted_server)
        assert await client.post("/x", cast_to=bool) is True
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from opencode_sdk import ClientOptions, Opencode
from opencode_sdk.observability.collector import MetricsCollector

BASE_URL = "http://opencode.test"


class ScriptedServer:
    """Replays scripted replies and records every request it receives."""

    def __init__(self) -> None:
        self.replies: list[httpx.Response | Exception] = []
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def scripted_server() -> ScriptedServer:
    return ScriptedServer()


@pytest.fixture
def metrics() -> MetricsCollector:
    """Collector isolated from the process-wide Prometheus registry."""
    return MetricsCollector(enable_prometheus=False)


@pytest.fixture
def mock_sleep() -> Iterator[AsyncMock]:
    """Patch out backoff sleeps and record the requested delays."""
    with patch("opencode_sdk.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def make_client(
    metrics: MetricsCollector, mock_sleep: AsyncMock
) -> Callable[..., Opencode]:
    def factory(server: ScriptedServer, **settings: Any) -> Opencode:
        settings.setdefault("base_url", BASE_URL)
        http = httpx.AsyncClient(transport=server.transport)
        return Opencode.with_options(
            ClientOptions(**settings), http_client=http, metrics=metrics
        )

    return factory
