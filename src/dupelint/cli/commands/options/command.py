# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing the scanner option schema."""

from __future__ import annotations

from typing import Annotated

import typer

from ....runtime.console.manager import get_console_manager
from ...core.options import OPTION_SCHEMA
from .rendering import build_options_table


def options_command(
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
) -> None:
    """Render every scanner option as a table."""

    console = get_console_manager().get(color=not no_color, emoji=False)
    console.print(build_options_table(OPTION_SCHEMA))


__all__ = ["options_command"]
