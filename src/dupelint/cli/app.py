# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .commands import register_commands
from .core.typer_ext import TyperAppConfig, create_typer

app = create_typer(
    config=TyperAppConfig(
        name="dupelint",
        help_text="Resolve duplicate-finder command lines into validated configurations.",
        no_args_is_help=True,
    ),
)
register_commands(app)

__all__ = ["app"]
