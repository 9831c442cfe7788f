# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Base class for resource wrappers."""

from ..protocols.client import ClientProtocol


class BaseResource:
    """
    A group of endpoints bound to a client.

    Resources only translate arguments into a path, query and body and name
    the response type; retries, errors and validation happen in the client.
    """

    __slots__ = ("_client",)

    def __init__(self, client: ClientProtocol) -> None:
        self._client = client

    @property
    def client(self) -> ClientProtocol:
        return self._client


__all__ = ["BaseResource"]
