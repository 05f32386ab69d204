# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Options CLI command package."""

from __future__ import annotations

from typer import Typer

from ...core.shared import register_command
from .command import options_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the ``options`` command on ``app``."""

    register_command(app, options_command, name="options", help_text="List the scanner options.")
