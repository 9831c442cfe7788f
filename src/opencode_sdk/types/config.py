# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Server configuration model returned by ``GET /config``.

Only the structure the client reasons about is typed. Keybinds, hooks and
provider options are passed through as opaque JSON since the server owns
their schema.
"""

from typing import Annotated, Literal

from pydantic import Field, JsonValue

from .base import OpencodeModel


class ModeConfig(OpencodeModel):
    disable: bool | None = None
    model: str | None = None
    prompt: str | None = None
    temperature: float | None = None
    tools: dict[str, bool] | None = None


class AgentConfig(ModeConfig):
    description: str


class McpLocalConfig(OpencodeModel):
    type: Literal["local"] = "local"
    command: list[str]
    enabled: bool | None = None
    environment: dict[str, str] | None = None


class McpRemoteConfig(OpencodeModel):
    type: Literal["remote"] = "remote"
    url: str
    enabled: bool | None = None
    headers: dict[str, str] | None = None


McpConfig = Annotated[McpLocalConfig | McpRemoteConfig, Field(discriminator="type")]


class ProviderConfig(OpencodeModel):
    models: dict[str, JsonValue]
    api: str | None = None
    env: list[str] | None = None
    id: str | None = None
    name: str | None = None
    npm: str | None = None
    options: dict[str, JsonValue] | None = None


class Config(OpencodeModel):
    """Effective opencode configuration of the running server."""

    schema_: str | None = Field(default=None, alias="$schema")
    agent: dict[str, AgentConfig] | None = None
    autoshare: bool | None = None
    autoupdate: JsonValue = None
    """Either a boolean or the literal "notify"."""
    disabled_providers: list[str] | None = None
    experimental: dict[str, JsonValue] | None = None
    instructions: list[str] | None = None
    keybinds: dict[str, JsonValue] | None = None
    layout: Literal["auto", "stretch"] | None = None
    mcp: dict[str, McpConfig] | None = None
    mode: dict[str, ModeConfig] | None = None
    model: str | None = None
    provider: dict[str, ProviderConfig] | None = None
    share: Literal["manual", "auto", "disabled"] | None = None
    small_model: str | None = None
    theme: str | None = None
    username: str | None = None


__all__ = [
    "AgentConfig",
    "Config",
    "McpConfig",
    "McpLocalConfig",
    "McpRemoteConfig",
    "ModeConfig",
    "ProviderConfig",
]
