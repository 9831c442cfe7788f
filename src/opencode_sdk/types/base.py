# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base model for OpenCode API payloads.

Wire names are camelCase or ``...ID`` while attributes are snake_case, so
every model accepts both (``populate_by_name``) and keeps unknown fields
(``extra="allow"``) so newer servers do not break older clients.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class OpencodeModel(BaseModel):
    """Base class for every request and response model."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        # modelID and friends map to model_id
        protected_namespaces=(),
    )

    def to_body(self) -> dict[str, Any]:
        """Serialize as a JSON request body: wire names, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["OpencodeModel"]
