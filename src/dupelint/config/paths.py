# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve positional arguments into canonical, preference-tagged paths."""

from __future__ import annotations

import errno
import os
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final, TextIO

from .errors import NoValidPathsError
from .models import PathEntry

PREFERRED_TOGGLE: Final[str] = "//"
STDIN_SENTINEL: Final[str] = "-"
EMPTY_STDIN_NOTICE: Final[str] = "No readable paths were read from standard input."


@dataclass(slots=True)
class PathCollection:
    """Paths gathered from positional tokens.

    Attributes:
        entries: Canonical paths in the order they were supplied.
        notices: Warnings for paths that could not be accessed.
        failed: ``True`` when at least one path was inaccessible or a ``-``
            token produced no path.
    """

    entries: list[PathEntry] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)
    failed: bool = False


def canonicalize_path(path: str) -> str:
    """Return ``path`` with symlinks and relative segments resolved.

    Args:
        path: Path supplied by the user.

    Returns:
        str: Canonical absolute path.

    Raises:
        OSError: If ``path`` is missing or not readable.
    """

    if not os.path.exists(path):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    if not os.access(path, os.R_OK):
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
    return os.path.realpath(path)


def iter_stdin_paths(stream: TextIO) -> Iterator[str]:
    """Yield newline-separated paths from ``stream`` until end of input."""

    for line in stream:
        candidate = line.rstrip("\r\n")
        if candidate:
            yield candidate


def _add_path(collection: PathCollection, path: str, *, is_preferred: bool) -> None:
    """Canonicalize ``path`` and append it, recording a notice on failure."""

    try:
        resolved = canonicalize_path(path)
    except OSError as exc:
        collection.failed = True
        collection.notices.append(f"Can't open directory or file \"{path}\": {exc.strerror}")
        return
    collection.entries.append(PathEntry(path=resolved, is_preferred=is_preferred))


def collect_paths(
    tokens: Iterable[str],
    *,
    stdin: TextIO | None = None,
    fallback: str | None = None,
) -> PathCollection:
    """Resolve positional ``tokens`` into an ordered list of path entries.

    Every bare ``//`` flips the preferred flag applied to the paths that
    follow it. A bare ``-`` reads further paths from ``stdin`` until end of
    input, and counts as a failed path when it yields no readable path.
    When nothing was collected and nothing failed, ``fallback`` (the working
    directory by default) becomes the only path.

    Args:
        tokens: Positional arguments in command-line order.
        stdin: Stream consulted for the ``-`` sentinel; defaults to ``sys.stdin``.
        fallback: Path used when no positional path was given.

    Returns:
        PathCollection: Collected entries and notices for skipped paths.

    Raises:
        NoValidPathsError: If no path could be collected and at least one failed.
    """

    collection = PathCollection()
    is_preferred = False
    for token in tokens:
        if token == PREFERRED_TOGGLE:
            is_preferred = not is_preferred
        elif token == STDIN_SENTINEL:
            stream = stdin if stdin is not None else sys.stdin
            collected = len(collection.entries)
            for path in iter_stdin_paths(stream):
                _add_path(collection, path, is_preferred=is_preferred)
            if len(collection.entries) == collected:
                collection.failed = True
                collection.notices.append(EMPTY_STDIN_NOTICE)
        else:
            _add_path(collection, token, is_preferred=is_preferred)

    if collection.entries:
        return collection
    if collection.failed:
        raise NoValidPathsError(collection.notices)
    _add_path(collection, fallback if fallback is not None else os.getcwd(), is_preferred=is_preferred)
    if not collection.entries:
        raise NoValidPathsError(collection.notices)
    return collection


__all__ = [
    "EMPTY_STDIN_NOTICE",
    "PREFERRED_TOGGLE",
    "STDIN_SENTINEL",
    "PathCollection",
    "canonicalize_path",
    "collect_paths",
    "iter_stdin_paths",
]
