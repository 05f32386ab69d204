# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve CLI command package."""

from __future__ import annotations

from typer import Typer

from ...core.shared import register_command
from .command import PASSTHROUGH_CONTEXT, resolve_command

__all__ = ["register"]


def register(app: Typer) -> None:
    """Register the ``resolve`` command on ``app``.

    Args:
        app: Typer application receiving the command.
    """

    register_command(
        app,
        resolve_command,
        name="resolve",
        help_text="Resolve scanner options and paths into a validated configuration.",
        context_settings=PASSTHROUGH_CONTEXT,
    )
