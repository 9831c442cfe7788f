# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Error payloads shared by sessions, messages and events."""

from typing import Annotated, Literal

from pydantic import Field, JsonValue

from .base import OpencodeModel


class ProviderAuthErrorData(OpencodeModel):
    message: str
    provider_id: str = Field(alias="providerID")


class UnknownErrorData(OpencodeModel):
    message: str


class MessageAbortedError(OpencodeModel):
    name: Literal["MessageAbortedError"] = "MessageAbortedError"
    data: JsonValue = None


class ProviderAuthError(OpencodeModel):
    name: Literal["ProviderAuthError"] = "ProviderAuthError"
    data: ProviderAuthErrorData


class UnknownError(OpencodeModel):
    name: Literal["UnknownError"] = "UnknownError"
    data: UnknownErrorData


class MessageOutputLengthError(OpencodeModel):
    name: Literal["MessageOutputLengthError"] = "MessageOutputLengthError"
    data: JsonValue = None


SessionError = Annotated[
    MessageAbortedError
    | ProviderAuthError
    | UnknownError
    | MessageOutputLengthError,
    Field(discriminator="name"),
]
"""Why a session or assistant message failed, tagged by ``name``."""


__all__ = [
    "MessageAbortedError",
    "MessageOutputLengthError",
    "ProviderAuthError",
    "ProviderAuthErrorData",
    "SessionError",
    "UnknownError",
    "UnknownErrorData",
]
