# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Closing validation pass turning a draft into a frozen configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from ..runtime.console.manager import streams_are_interactive
from .constants import MAX_DEPTH, MAX_THREADS, MIN_DEPTH, MIN_THREADS
from .errors import ConfigConflictError
from .models import (
    SHARED_FIELDS,
    AbsoluteClamp,
    ClampBoundary,
    ConfigDraft,
    Configuration,
    FractionalClamp,
)
from .outputs import resolve_outputs
from .paths import collect_paths


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Frozen configuration plus the warnings raised while finalising it."""

    config: Configuration
    notices: tuple[str, ...]


def clamp(value: int, lower: int, upper: int) -> int:
    """Return ``value`` limited to the inclusive range ``[lower, upper]``."""

    return min(max(value, lower), upper)


def clamp_bounds_inverted(start: ClampBoundary, end: ClampBoundary) -> bool:
    """Return ``True`` when the start clamp does not lie before the end clamp.

    Boundaries are compared only when both use the same representation.
    A mix of absolute offsets and fractions depends on the size of each
    file, so it is accepted here and left to the reader of the window.

    Args:
        start: Boundary from ``--clamp-low``.
        end: Boundary from ``--clamp-top``.

    Returns:
        bool: ``True`` when the window is empty or inverted.
    """

    if isinstance(start, AbsoluteClamp) and isinstance(end, AbsoluteClamp):
        return start.offset >= end.offset
    if isinstance(start, FractionalClamp) and isinstance(end, FractionalClamp):
        return start.ratio >= end.ratio
    return False


def check_conflicts(draft: ConfigDraft) -> None:
    """Raise when mutually exclusive options were combined.

    Args:
        draft: Draft after every option has been consumed.

    Raises:
        ConfigConflictError: If both keep-all rules are set or the clamp
            window is inverted.
    """

    if draft.keep_all_tagged and draft.keep_all_untagged:
        raise ConfigConflictError("can't specify both --keep-all-tagged and --keep-all-untagged")
    if clamp_bounds_inverted(draft.clamp_start, draft.clamp_end):
        raise ConfigConflictError("-q (--clamp-low) should be lower than -Q (--clamp-top)!")


def validate_configuration(
    draft: ConfigDraft,
    *,
    stdin: TextIO | None = None,
    interactive: bool | None = None,
) -> ValidationResult:
    """Run the closing validation pass and freeze the configuration.

    Checks run in a fixed order and the first failure wins: keep-all
    conflict, clamp inversion, path collection, then output setup.
    Thread count and traversal depth are clamped silently, and colour is
    switched off unless both stdout and stderr are terminals.

    Args:
        draft: Draft after every option has been consumed.
        stdin: Stream used when a ``-`` positional requests paths from input.
        interactive: Override for terminal detection; ``None`` probes the streams.

    Returns:
        ValidationResult: Frozen configuration and path warnings.

    Raises:
        ConfigError: If any closing check fails.
    """

    check_conflicts(draft)
    collection = collect_paths(draft.positionals, stdin=stdin, fallback=draft.working_directory or None)
    outputs = resolve_outputs(draft)

    is_interactive = streams_are_interactive() if interactive is None else interactive
    fields = {name: getattr(draft, name) for name in SHARED_FIELDS}
    fields.update(
        threads=clamp(draft.threads, MIN_THREADS, MAX_THREADS),
        depth=clamp(draft.depth, MIN_DEPTH, MAX_DEPTH),
        color=draft.color and is_interactive,
        outputs=outputs,
        verbosity=draft.verbosity,
        paths=tuple(collection.entries),
    )
    return ValidationResult(config=Configuration(**fields), notices=tuple(collection.notices))


__all__ = [
    "ValidationResult",
    "check_conflicts",
    "clamp",
    "clamp_bounds_inverted",
    "validate_configuration",
]
