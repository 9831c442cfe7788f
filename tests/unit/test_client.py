"""
Unit tests for the Opencode client.

Tests cover:
- Construction from keyword arguments, ClientOptions and the environment
- build_url(): path joining, query merging, ordering and encoding
- build_headers(): defaults, retry counter and per-call overrides
- Body encoding and response validation helpers
- Resource accessors and lifecycle of owned vs injected HTTP clients
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from pydantic import BaseModel, Field

from opencode_sdk import __version__
from opencode_sdk.client import (
    USER_AGENT,
    Opencode,
    _encode_body,
    _json_or_none,
    _validate_json,
)
from opencode_sdk.config import BASE_URL_ENV_VAR, DEFAULT_BASE_URL, ClientOptions
from opencode_sdk.exceptions import SerializationError
from opencode_sdk.observability.collector import MetricsCollector
from opencode_sdk.protocols import ClientProtocol
from opencode_sdk.resources import (
    AppResource,
    ConfigResource,
    EventResource,
    FileResource,
    FindResource,
    SessionResource,
    TuiResource,
)


def make_client(**kwargs) -> Opencode:
    kwargs.setdefault("base_url", "http://server:4096")
    return Opencode(options=ClientOptions(metrics_enabled=False, **kwargs))


class TestConstruction:
    """Tests for client construction and settings resolution."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(BASE_URL_ENV_VAR, raising=False)
        client = Opencode()
        assert client.base_url == DEFAULT_BASE_URL
        assert client.timeout == 60.0
        assert client.max_retries == 2
        assert client.default_headers == {}
        assert client.default_query == {}

    def test_keyword_settings(self) -> None:
        client = Opencode(
            base_url="http://a:1",
            timeout=5,
            max_retries=0,
            default_headers={"x-a": "1"},
            default_query={"directory": "/tmp"},
        )
        assert client.base_url == "http://a:1"
        assert client.timeout == 5
        assert client.max_retries == 0
        assert client.default_headers == {"x-a": "1"}
        assert client.default_query == {"directory": "/tmp"}

    def test_env_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(BASE_URL_ENV_VAR, "http://from-env:9")
        assert Opencode().base_url == "http://from-env:9"

    def test_with_options(self) -> None:
        options = ClientOptions(base_url="http://opts:1", max_retries=5)
        client = Opencode.with_options(options)
        assert client.options is options
        assert client.base_url == "http://opts:1"
        assert client.max_retries == 5

    def test_options_and_settings_conflict(self) -> None:
        with pytest.raises(ValueError, match="not both"):
            Opencode(options=ClientOptions(), timeout=3)

    def test_invalid_settings_rejected(self) -> None:
        with pytest.raises(ValueError):
            Opencode(max_retries=-1)

    def test_metrics_disabled(self) -> None:
        assert make_client().metrics is None

    def test_injected_metrics(self) -> None:
        metrics = MetricsCollector(enable_prometheus=False)
        client = Opencode.with_options(ClientOptions(), metrics=metrics)
        assert client.metrics is metrics

    def test_satisfies_client_protocol(self) -> None:
        assert isinstance(make_client(), ClientProtocol)

    def test_repr(self) -> None:
        client = make_client(timeout=3.0, max_retries=1)
        assert repr(client) == (
            "Opencode(base_url='http://server:4096', timeout=3.0, max_retries=1)"
        )

    def test_default_headers_copied(self) -> None:
        client = Opencode(default_headers={"x-a": "1"})
        client.default_headers["x-b"] = "2"
        assert client.default_headers == {"x-a": "1"}


class TestBuildUrl:
    """Tests for build_url()."""

    def test_joins_path(self) -> None:
        assert make_client().build_url("/session") == "http://server:4096/session"

    def test_adds_leading_slash(self) -> None:
        assert make_client().build_url("session") == "http://server:4096/session"

    def test_strips_trailing_slash_from_base(self) -> None:
        client = make_client(base_url="http://server:4096/")
        assert client.build_url("/app") == "http://server:4096/app"

    def test_query_sorted(self) -> None:
        url = make_client().build_url("/find", {"zeta": "1", "alpha": "2"})
        assert url == "http://server:4096/find?alpha=2&zeta=1"

    def test_none_values_dropped(self) -> None:
        url = make_client().build_url("/file", {"path": None})
        assert url == "http://server:4096/file"

    def test_bool_and_list_values(self) -> None:
        url = make_client().build_url("/x", {"flag": True, "ids": ["a", "b"]})
        assert url == "http://server:4096/x?flag=true&ids=a&ids=b"

    def test_default_query_merged(self) -> None:
        client = make_client(default_query={"directory": "proj", "b": "default"})
        url = client.build_url("/x", {"b": "call"})
        assert url == "http://server:4096/x?b=call&directory=proj"

    def test_values_encoded(self) -> None:
        url = make_client().build_url("/find", {"pattern": "a&b=c"})
        assert url == "http://server:4096/find?pattern=a%26b%3Dc"

    def test_deterministic(self) -> None:
        client = make_client()
        query = {"b": 1, "a": 2, "c": 3}
        assert client.build_url("/x", query) == client.build_url(
            "/x", dict(reversed(list(query.items())))
        )


class TestBuildHeaders:
    """Tests for build_headers()."""

    def test_first_attempt(self) -> None:
        headers = make_client().build_headers()
        assert headers["accept"] == "application/json"
        assert headers["user-agent"] == USER_AGENT
        assert "x-retry-count" not in headers

    def test_user_agent_carries_version(self) -> None:
        assert USER_AGENT == f"opencode-sdk-python/{__version__}"

    def test_retry_counter(self) -> None:
        headers = make_client().build_headers(attempt=2)
        assert headers["x-retry-count"] == "2"

    def test_default_headers_included(self) -> None:
        client = make_client(default_headers={"Authorization": "Bearer t"})
        assert client.build_headers()["authorization"] == "Bearer t"

    def test_extra_headers_win(self) -> None:
        client = make_client(default_headers={"x-a": "default"})
        headers = client.build_headers(
            1, {"x-a": "extra", "Accept": "text/plain", "x-retry-count": "9"}
        )
        assert headers["x-a"] == "extra"
        assert headers["accept"] == "text/plain"
        assert headers["x-retry-count"] == "9"

    def test_defaults_do_not_override_accept(self) -> None:
        client = make_client(default_headers={"Accept": "text/html"})
        assert client.build_headers()["accept"] == "application/json"


class Params(BaseModel):
    session_id: str = Field(alias="sessionID")
    note: str | None = None


class TestHelpers:
    """Tests for body encoding and response parsing helpers."""

    def test_encode_none(self) -> None:
        assert _encode_body(None) is None

    def test_encode_dict_compact(self) -> None:
        assert _encode_body({"a": 1, "b": [1, 2]}) == b'{"a":1,"b":[1,2]}'

    def test_encode_model_by_alias_without_none(self) -> None:
        body = _encode_body(Params(sessionID="ses_1"))
        assert body == b'{"sessionID":"ses_1"}'

    def test_encode_unserializable(self) -> None:
        with pytest.raises(SerializationError):
            _encode_body({"x": object()})

    def test_validate_untyped(self) -> None:
        assert _validate_json(b'{"a": [1]}', None) == {"a": [1]}

    def test_validate_typed(self) -> None:
        assert _validate_json(b"true", bool) is True

    def test_validate_failure(self) -> None:
        with pytest.raises(SerializationError):
            _validate_json(b'{"sessionID": 5}', Params)

    def test_validate_malformed(self) -> None:
        with pytest.raises(SerializationError):
            _validate_json(b"{oops", None)

    def test_json_or_none(self) -> None:
        assert _json_or_none(b'{"message":"x"}') == {"message": "x"}
        assert _json_or_none(b"<html>") is None
        assert _json_or_none(b"") is None


class TestResources:
    """Tests for resource accessors."""

    @pytest.mark.parametrize(
        ("name", "resource_cls"),
        [
            ("app", AppResource),
            ("config", ConfigResource),
            ("event", EventResource),
            ("file", FileResource),
            ("find", FindResource),
            ("session", SessionResource),
            ("tui", TuiResource),
        ],
    )
    def test_accessor(self, name: str, resource_cls: type) -> None:
        client = make_client()
        resource = getattr(client, name)
        assert isinstance(resource, resource_cls)
        assert resource.client is client
        assert getattr(client, name) is resource


class TestLifecycle:
    """Tests for closing the transport."""

    @pytest.mark.asyncio
    async def test_owned_client_closed(self) -> None:
        client = make_client()
        with patch.object(client._http, "aclose", new_callable=AsyncMock) as aclose:
            async with client:
                pass
        aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self) -> None:
        http = httpx.AsyncClient()
        client = Opencode.with_options(
            ClientOptions(metrics_enabled=False), http_client=http
        )
        await client.close()
        assert http.is_closed is False
        await http.aclose()
