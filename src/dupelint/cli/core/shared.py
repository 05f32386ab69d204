# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Error type, logger facade and command registration shared by CLI commands."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ...logging import fail as core_fail
from ...logging import warn as core_warn

_PAIR_PATTERN: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=('.*?'|\".*?\"|\S+)")


class CLIError(RuntimeError):
    """Failure that terminates a command with ``exit_code``."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def highlight_pairs(message: str) -> Text:
    """Return ``message`` as Rich text with ``key=value`` pairs emphasised.

    The ``option`` key is coloured apart from the other keys so option
    traces stand out in a long debug stream.

    Args:
        message: Plain debug line.

    Returns:
        Text: Styled text prefixed with ``[debug]``.
    """

    text = Text("[debug] ", style="bold cyan")
    cursor = 0
    for match in _PAIR_PATTERN.finditer(message):
        start, end = match.span()
        text.append(message[cursor:start], style="dim")
        key, value = match.groups()
        text.append(key, style="bold magenta")
        text.append("=", style="dim")
        text.append(value, style="bold blue" if key == "option" else "bold green")
        cursor = end
    text.append(message[cursor:], style="dim")
    return text


@dataclass(slots=True)
class CLILogger:
    """Route command output to the shared logging helpers.

    Warnings, failures and debug traces go to standard error. Only
    :meth:`echo` writes to standard output, so a resolved configuration can
    be piped without noise.
    """

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    use_color: bool | None = None

    def fail(self, message: str) -> None:
        """Report a fatal configuration problem."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Report a non-fatal notice."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write a payload line to standard output."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self.console.print(highlight_pairs(message))


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` bound to a standard-error console.

    Args:
        emoji: Whether messages may carry emoji prefixes.
        debug: Whether :meth:`CLILogger.debug` prints anything.
        no_color: Whether ANSI colour is suppressed.

    Returns:
        CLILogger: Configured logger.
    """

    console = Console(no_color=no_color, highlight=False, stderr=True, soft_wrap=True)
    return CLILogger(
        console=console,
        use_emoji=emoji,
        debug_enabled=debug,
        use_color=False if no_color else None,
    )


CommandCallable = Callable[..., None]


def register_command(
    app: typer.Typer,
    callback: CommandCallable,
    *,
    name: str,
    help_text: str,
    context_settings: dict[str, object] | None = None,
) -> CommandCallable:
    """Attach ``callback`` to ``app`` as the command ``name``.

    Args:
        app: Typer application receiving the command.
        callback: Function implementing the command.
        name: Command name on the command line.
        help_text: One-line help shown in the command listing.
        context_settings: Optional Click context settings for the command.

    Returns:
        CommandCallable: ``callback`` as returned by Typer.
    """

    decorator = app.command(name=name, help=help_text, context_settings=context_settings)
    return decorator(callback)


__all__: Final = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "highlight_pairs",
    "register_command",
]
