# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Terminal detection and cached Rich consoles for both output streams."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal.

    Streams without a working ``isatty``, such as closed files or capture
    buffers lacking the method, count as non-terminals.
    """

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


def streams_are_interactive() -> bool:
    """Return ``True`` when both stdout and stderr are terminals."""

    return detect_tty(sys.stdout) and detect_tty(sys.stderr)


@dataclass(frozen=True, slots=True)
class ConsoleKey:
    """Presentation flags identifying one cached console."""

    color: bool
    emoji: bool
    stderr: bool
    tty: bool

    @property
    def styled(self) -> bool:
        return self.color and self.tty


@dataclass(slots=True)
class RichConsoleManager:
    """Hand out one Rich :class:`Console` per combination of presentation flags.

    Consoles are created without an explicit file so they write to whatever
    ``sys.stdout`` or ``sys.stderr`` is at print time.
    """

    _cache: dict[ConsoleKey, Console] = field(default_factory=dict)

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return the console matching the requested flags.

        Args:
            color: Whether ANSI styling is wanted; it is applied only on a terminal.
            emoji: Whether Rich may substitute emoji codes.
            stderr: ``True`` for standard error, ``False`` for standard output.

        Returns:
            Console: Shared console for these flags and the current terminal state.
        """

        tty = detect_tty(sys.stderr if stderr else sys.stdout)
        key = ConsoleKey(color=color, emoji=emoji, stderr=stderr, tty=tty)
        console = self._cache.get(key)
        if console is None:
            console = Console(
                color_system="auto" if key.styled else None,
                force_terminal=key.tty,
                no_color=not key.styled,
                emoji=emoji,
                soft_wrap=True,
                stderr=stderr,
                highlight=False,
            )
            self._cache[key] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = [
    "ConsoleKey",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "streams_are_interactive",
]
