# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for the OpenCode SDK.

Available protocols:
- ClientProtocol: Interface resource wrappers call into
- ClosableResponseProtocol: Interface for the owner of an SSE byte stream
"""

from .client import ClientProtocol
from .streaming import ClosableResponseProtocol

__all__ = [
    "ClientProtocol",
    "ClosableResponseProtocol",
]
