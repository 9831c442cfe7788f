# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Terminal UI control models."""

from .base import OpencodeModel


class TuiAppendPromptParams(OpencodeModel):
    """Body of ``POST /tui/append-prompt``."""

    text: str


__all__ = ["TuiAppendPromptParams"]
