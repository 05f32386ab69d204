# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""User-facing message helpers with optional colour and emoji prefixes.

Informational lines go to standard output. Warnings and failures go to
standard error, and colour follows whichever of the two streams is written.
"""

from __future__ import annotations

import sys
from typing import Final

from rich.text import Text

from .runtime.console.manager import detect_tty, get_console_manager

ANSI: Final[dict[str, str]] = {
    "reset": "\033[0m",
    "cyan": "\033[36;1m",
    "green": "\033[32;1m",
    "yellow": "\033[33;1m",
    "red": "\033[31;1m",
}

_INFO_PREFIX: Final[str] = "ℹ️ "
_WARN_PREFIX: Final[str] = "⚠️ "
_FAIL_PREFIX: Final[str] = "❌ "


def colorize(text: str, code: str, enable: bool) -> str:
    """Wrap ``text`` in the ANSI sequence named ``code``.

    Nothing is added unless ``enable`` is set and standard output is a
    terminal. Unknown codes leave the text uncoloured but still reset.
    """

    if not enable or not detect_tty():
        return text
    return f"{ANSI.get(code, '')}{text}{ANSI['reset']}"


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _emit(
    msg: str,
    *,
    prefix: str,
    style: str,
    use_emoji: bool,
    use_color: bool | None,
    stderr: bool,
) -> None:
    stream = sys.stderr if stderr else sys.stdout
    color_enabled = detect_tty(stream) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(f"{emoji(prefix, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an informational line on standard output."""

    _emit(msg, prefix=_INFO_PREFIX, style="cyan", use_emoji=use_emoji, use_color=use_color, stderr=False)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a configuration notice on standard error.

    Args:
        msg: Notice text.
        use_emoji: Whether to prefix the line with a warning glyph.
        use_color: Explicit colour choice; ``None`` follows terminal detection.
    """

    _emit(msg, prefix=_WARN_PREFIX, style="yellow", use_emoji=use_emoji, use_color=use_color, stderr=True)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a fatal configuration error on standard error.

    Args:
        msg: Error text.
        use_emoji: Whether to prefix the line with a failure glyph.
        use_color: Explicit colour choice; ``None`` follows terminal detection.
    """

    _emit(msg, prefix=_FAIL_PREFIX, style="red", use_emoji=use_emoji, use_color=use_color, stderr=True)


__all__ = ["ANSI", "colorize", "emoji", "fail", "info", "warn"]
