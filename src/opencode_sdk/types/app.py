# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
App, mode and provider models.

Returned by the ``app`` resource: server paths and state, the configured
agent modes and the model catalogue of every provider.
"""

from typing import Literal

from pydantic import Field, JsonValue

from .base import OpencodeModel


class AppPath(OpencodeModel):
    config: str
    cwd: str
    data: str
    root: str
    state: str


class AppTime(OpencodeModel):
    initialized: float | None = None
    """Epoch milliseconds of project initialization, if it happened."""


class App(OpencodeModel):
    """Server-side view of the current project."""

    git: bool
    hostname: str
    path: AppPath
    time: AppTime


class ModeModel(OpencodeModel):
    model_id: str = Field(alias="modelID")
    provider_id: str = Field(alias="providerID")


class Mode(OpencodeModel):
    """An agent mode: which tools it may use and which model it prefers."""

    name: str
    tools: dict[str, bool]
    model: ModeModel | None = None
    prompt: str | None = None
    temperature: float | None = None


class ModelCost(OpencodeModel):
    input: float
    output: float
    cache_read: float | None = None
    cache_write: float | None = None


class ModelLimit(OpencodeModel):
    context: int
    output: int


class Model(OpencodeModel):
    id: str
    attachment: bool
    cost: ModelCost
    limit: ModelLimit
    name: str
    options: dict[str, JsonValue]
    reasoning: bool
    release_date: str
    temperature: bool
    tool_call: bool


class Provider(OpencodeModel):
    id: str
    env: list[str]
    models: dict[str, Model]
    name: str
    api: str | None = None
    npm: str | None = None


class AppProvidersResponse(OpencodeModel):
    default: dict[str, str]
    """Default model ID per provider ID."""

    providers: list[Provider]


LogLevel = Literal["debug", "info", "error", "warn"]


class AppLogParams(OpencodeModel):
    """Body of ``POST /log``: a log line written to the server log."""

    level: LogLevel
    message: str
    service: str
    extra: dict[str, JsonValue] | None = None


__all__ = [
    "App",
    "AppLogParams",
    "AppPath",
    "AppProvidersResponse",
    "AppTime",
    "LogLevel",
    "Mode",
    "ModeModel",
    "Model",
    "ModelCost",
    "ModelLimit",
    "Provider",
]
