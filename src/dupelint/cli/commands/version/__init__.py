# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Version CLI command package."""

from __future__ import annotations

from typer import Typer

from ...core.shared import register_command
from .command import version_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the ``version`` command on ``app``."""

    register_command(app, version_command, name="version", help_text="Show the version and features.")
