# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Resource wrappers, one per group of endpoints.

Each is reached through a client property, e.g. ``client.session.list()``.
"""

from .app import AppResource
from .base import BaseResource
from .config import ConfigResource
from .event import EventResource
from .file import FileResource
from .find import FindResource
from .session import SessionResource
from .tui import TuiResource

__all__ = [
    "AppResource",
    "BaseResource",
    "ConfigResource",
    "EventResource",
    "FileResource",
    "FindResource",
    "SessionResource",
    "TuiResource",
]
