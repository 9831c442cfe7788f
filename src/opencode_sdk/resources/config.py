# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Config endpoint."""

from __future__ import annotations

from ..config import RequestOptions
from ..types.config import Config
from .base import BaseResource


class ConfigResource(BaseResource):
    async def get(self, *, options: RequestOptions | None = None) -> Config:
        """Return the effective server configuration."""
        return await self._client.get("/config", options=options, cast_to=Config)


__all__ = ["ConfigResource"]
