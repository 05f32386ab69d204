# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translate raw command-line tokens into a frozen configuration."""

from __future__ import annotations

import os
import time
from collections.abc import Iterable, Sequence
from typing import Final, TextIO

from ...config.constants import VERBOSITY_LADDER, Verbosity
from ...config.errors import NoValidPathsError
from ...config.models import ConfigDraft, Configuration
from ...config.validation import validate_configuration
from .shared import CLILogger, build_cli_logger
from .tokenizer import OptionToken, tokenize

PROGRAM_NAME: Final[str] = "dupelint"


def initial_draft(
    argv: Sequence[str],
    *,
    now: float | None = None,
    cwd: str | None = None,
) -> ConfigDraft:
    """Return the draft every resolution starts from.

    Args:
        argv: Raw arguments without the program name.
        now: Reference time for timestamp checks; defaults to the current time.
        cwd: Working directory; defaults to :func:`os.getcwd`.

    Returns:
        ConfigDraft: Draft carrying the built-in defaults.
    """

    working = os.getcwd() if cwd is None else cwd
    return ConfigDraft(
        working_directory=os.path.join(working, ""),
        command_line=" ".join((PROGRAM_NAME, *argv)),
        reference_time=time.time() if now is None else now,
    )


def warnings_enabled(verbosity: Verbosity) -> bool:
    """Return ``True`` when ``verbosity`` lets warnings through."""

    return VERBOSITY_LADDER.index(verbosity) >= VERBOSITY_LADDER.index(Verbosity.WARNING)


def _emit_notices(logger: CLILogger, verbosity: Verbosity, notices: Iterable[str]) -> None:
    if not warnings_enabled(verbosity):
        return
    for notice in notices:
        logger.warn(notice)


def _describe(token: OptionToken) -> str:
    if token.spec.takes_value:
        return f"option=--{token.spec.long} value={token.value!r}"
    return f"option=--{token.spec.long}"


def fold_arguments(argv: Sequence[str], draft: ConfigDraft, *, logger: CLILogger) -> ConfigDraft:
    """Apply every token of ``argv`` to ``draft`` in order.

    New notices are forwarded to ``logger`` right after the option that
    raised them, and each option is traced at debug verbosity.

    Args:
        argv: Raw arguments without the program name.
        draft: Starting draft.
        logger: Destination for warnings and debug traces.

    Returns:
        ConfigDraft: Draft after every option and positional has been consumed.

    Raises:
        ConfigError: If a token is malformed or a handler rejects its value.
    """

    positionals: list[str] = list(draft.positionals)
    for token in tokenize(argv):
        if not isinstance(token, OptionToken):
            positionals.append(token.value)
            continue
        seen = len(draft.notices)
        draft = token.spec.handler(draft, token.value)
        if draft.verbosity is Verbosity.DEBUG:
            logger.debug(_describe(token))
        _emit_notices(logger, draft.verbosity, draft.notices[seen:])
    return draft.evolve(positionals=tuple(positionals))


def build_configuration(
    argv: Sequence[str],
    *,
    stdin: TextIO | None = None,
    now: float | None = None,
    interactive: bool | None = None,
    logger: CLILogger | None = None,
) -> Configuration:
    """Resolve ``argv`` into a validated, read-only configuration.

    Args:
        argv: Raw arguments without the program name.
        stdin: Stream read when a ``-`` positional is present; defaults to ``sys.stdin``.
        now: Reference time for timestamp checks; defaults to the current time.
        interactive: Override for terminal detection used by the colour setting.
        logger: Destination for warnings; a stderr logger is built when ``None``.

    Returns:
        Configuration: Frozen configuration for the scanning engines.

    Raises:
        ConfigError: If any option or the closing validation pass fails.
    """

    active_logger = logger or build_cli_logger(emoji=False, debug=True)
    draft = fold_arguments(argv, initial_draft(argv, now=now), logger=active_logger)
    try:
        result = validate_configuration(draft, stdin=stdin, interactive=interactive)
    except NoValidPathsError as exc:
        _emit_notices(active_logger, draft.verbosity, exc.notices)
        raise
    _emit_notices(active_logger, result.config.verbosity, result.notices)
    return result.config


__all__ = [
    "PROGRAM_NAME",
    "build_configuration",
    "fold_arguments",
    "initial_draft",
    "warnings_enabled",
]
