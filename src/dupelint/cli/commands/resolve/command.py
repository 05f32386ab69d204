# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command resolving raw tokens into a configuration."""

from __future__ import annotations

from typing import Annotated

import typer

from ...core.shared import CLIError, build_cli_logger
from .services import render_configuration, resolve_configuration

# Every option token is handed to the tokenizer untouched.
PASSTHROUGH_CONTEXT: dict[str, object] = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}


def resolve_command(
    tokens: Annotated[
        list[str] | None,
        typer.Argument(help="Options and paths, exactly as the scanner would receive them."),
    ] = None,
) -> None:
    """Print the configuration resolved from ``tokens`` as JSON.

    Args:
        tokens: Raw option and path tokens.

    Raises:
        typer.Exit: Raised with status 1 when resolution fails.
    """

    logger = build_cli_logger(emoji=False, debug=True)
    try:
        config = resolve_configuration(tokens or [], logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(render_configuration(config))


__all__ = ["PASSTHROUGH_CONTEXT", "resolve_command"]
