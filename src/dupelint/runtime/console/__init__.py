# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console helpers shared by the CLI and logging layers."""

from __future__ import annotations

from .manager import RichConsoleManager, detect_tty, get_console_manager, streams_are_interactive

__all__ = [
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "streams_are_interactive",
]
