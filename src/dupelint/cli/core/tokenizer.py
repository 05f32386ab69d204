# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Generic token-matching loop driven by the declarative option schema."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Final

from ...config.errors import OptionSyntaxError
from ...config.paths import STDIN_SENTINEL
from .options import OPTION_SCHEMA, OptionSchema, OptionSpec

END_OF_OPTIONS: Final[str] = "--"


@dataclass(frozen=True, slots=True)
class OptionToken:
    """An option occurrence together with the value it consumed."""

    spec: OptionSpec
    value: str
    raw: str


@dataclass(frozen=True, slots=True)
class PositionalToken:
    """A token handed to path collection unchanged."""

    value: str


Token = OptionToken | PositionalToken


class _ArgumentCursor:
    """Forward-only cursor over the raw argument vector."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = tuple(argv)
        self._index = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._index >= len(self._argv):
            raise StopIteration
        token = self._argv[self._index]
        self._index += 1
        return token

    def take_value(self, option: str) -> str:
        """Consume the next token as the value of ``option``.

        Raises:
            OptionSyntaxError: If no token is left.
        """

        try:
            return next(self)
        except StopIteration:
            raise OptionSyntaxError(f"Missing argument for {option}") from None

    def remaining(self) -> tuple[str, ...]:
        """Consume and return every token left."""

        rest = self._argv[self._index :]
        self._index = len(self._argv)
        return rest


def _is_option(token: str) -> bool:
    return token.startswith("-") and token != STDIN_SENTINEL


def _long_option(token: str, cursor: _ArgumentCursor, schema: OptionSchema) -> OptionToken:
    """Resolve a ``--name`` or ``--name=value`` token."""

    name, separator, inline = token[2:].partition("=")
    spec = schema.find_long(name)
    if spec is None:
        raise OptionSyntaxError(f"Unknown option --{name}")
    if not spec.takes_value:
        if separator:
            raise OptionSyntaxError(f"Option --{name} does not take a value")
        return OptionToken(spec=spec, value="", raw=token)
    value = inline if separator else cursor.take_value(f"--{name}")
    return OptionToken(spec=spec, value=value, raw=token)


def _short_cluster(token: str, cursor: _ArgumentCursor, schema: OptionSchema) -> Iterator[OptionToken]:
    """Resolve ``-x``, ``-xvalue``, ``-x value`` and clustered switches such as ``-vvv``."""

    cluster = token[1:]
    for index, name in enumerate(cluster):
        spec = schema.find_short(name)
        if spec is None:
            raise OptionSyntaxError(f"Unknown option -{name}")
        if not spec.takes_value:
            yield OptionToken(spec=spec, value="", raw=f"-{name}")
            continue
        attached = cluster[index + 1 :]
        value = attached if attached else cursor.take_value(f"-{name}")
        yield OptionToken(spec=spec, value=value, raw=f"-{name}")
        return


def tokenize(argv: Sequence[str], schema: OptionSchema = OPTION_SCHEMA) -> Iterator[Token]:
    """Yield option and positional tokens for ``argv`` in order.

    Positionals may appear anywhere. ``--`` ends option parsing, and the
    bare ``-`` and ``//`` tokens are always positionals.

    Args:
        argv: Raw arguments without the program name.
        schema: Option records to match against.

    Yields:
        Token: :class:`OptionToken` or :class:`PositionalToken` instances.

    Raises:
        OptionSyntaxError: If an option is unknown, lacks its value, or
            receives a value it does not take.
    """

    cursor = _ArgumentCursor(argv)
    for token in cursor:
        if token == END_OF_OPTIONS:
            for rest in cursor.remaining():
                yield PositionalToken(rest)
            return
        if not _is_option(token):
            yield PositionalToken(token)
        elif token.startswith("--"):
            yield _long_option(token, cursor, schema)
        else:
            yield from _short_cluster(token, cursor, schema)


__all__ = [
    "END_OF_OPTIONS",
    "OptionToken",
    "PositionalToken",
    "Token",
    "tokenize",
]
