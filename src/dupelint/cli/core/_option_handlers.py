# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pure option handlers mapping ``(draft, raw value)`` to a new draft."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Final

from ...config.clamp import resolve_clamp
from ...config.constants import DEFAULT_SINKS, PARANOIA_ALGORITHMS, PROGRESS_SINKS, HashAlgorithm
from ...config.errors import ConfigConflictError, OptionSyntaxError
from ...config.lint_types import apply_lint_types
from ...config.models import ConfigDraft
from ...config.outputs import apply_config_pair, apply_output_pair, apply_sink_preset
from ...config.sizes import parse_size, parse_size_range
from ...config.timestamps import apply_timestamp, apply_timestamp_file

OptionHandler = Callable[[ConfigDraft, str], ConfigDraft]

PARANOIA_RANGE_MESSAGE: Final[str] = "Only up to -ppp or down to -P flags allowed."


def _parse_int(option: str, value: str) -> int:
    """Return ``value`` as an integer or raise a syntax error naming ``option``.

    Args:
        option: Long option name used in the error message.
        value: Raw value supplied on the command line.

    Returns:
        int: Parsed integer.

    Raises:
        OptionSyntaxError: If ``value`` is not an integer.
    """

    try:
        return int(value.strip())
    except ValueError as exc:
        raise OptionSyntaxError(f"Cannot parse integer value '{value}' for --{option}") from exc


def integer_field(option: str, field: str) -> OptionHandler:
    """Return a handler storing an integer option on ``field``."""

    def handler(draft: ConfigDraft, value: str) -> ConfigDraft:
        return draft.evolve(**{field: _parse_int(option, value)})

    return handler


def string_field(field: str) -> OptionHandler:
    """Return a handler storing the raw value on ``field``."""

    def handler(draft: ConfigDraft, value: str) -> ConfigDraft:
        return draft.evolve(**{field: value})

    return handler


def set_flag(field: str, enabled: bool) -> OptionHandler:
    """Return a switch handler assigning ``enabled`` to ``field``.

    Args:
        field: Boolean configuration field toggled by the switch.
        enabled: Value written when the switch is seen.

    Returns:
        OptionHandler: Handler ignoring its raw value.
    """

    def handler(draft: ConfigDraft, value: str) -> ConfigDraft:
        del value
        return draft.evolve(**{field: enabled})

    return handler


def handle_size_limits(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Apply ``--size min-max`` and record that explicit limits were given.

    Raises:
        SizeSpecError: If either side of the range is invalid or the range is inverted.
    """

    min_size, max_size = parse_size_range(value)
    return draft.evolve(min_size=min_size, max_size=max_size, limits_specified=True)


def handle_paranoid_mem(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Apply ``--max-paranoid-mem``; invalid sizes are fatal."""

    return draft.evolve(paranoid_mem=parse_size(value))


def handle_algorithm(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Select the checksum algorithm named by ``value``.

    Raises:
        ConfigConflictError: If ``value`` is not in the algorithm catalog.
    """

    algorithm = HashAlgorithm.from_raw(value)
    if algorithm is None:
        raise ConfigConflictError(f"Unknown hash algorithm: '{value}'")
    return draft.evolve(checksum_type=algorithm)


def _step_paranoia(draft: ConfigDraft, delta: int) -> ConfigDraft:
    """Move the paranoia counter by ``delta`` and pick the implied algorithm.

    A counter of zero keeps whatever ``--algorithm`` selected.

    Raises:
        ConfigConflictError: If the counter leaves the supported range.
    """

    level = draft.paranoia + delta
    if level not in PARANOIA_ALGORITHMS:
        raise ConfigConflictError(PARANOIA_RANGE_MESSAGE)
    algorithm = PARANOIA_ALGORITHMS[level]
    if algorithm is None:
        return draft.evolve(paranoia=level)
    return draft.evolve(paranoia=level, checksum_type=algorithm)


def handle_paranoid(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Apply one ``-p``."""

    del value
    return _step_paranoia(draft, 1)


def handle_less_paranoid(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Apply one ``-P``."""

    del value
    return _step_paranoia(draft, -1)


def handle_loud(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Raise verbosity by one step."""

    del value
    return draft.evolve(verbosity_count=draft.verbosity_count + 1)


def handle_quiet(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Lower verbosity by one step."""

    del value
    return draft.evolve(verbosity_count=draft.verbosity_count - 1)


def handle_cache(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Append a JSON cache file; the file must already exist.

    Raises:
        ConfigConflictError: If ``value`` is not an existing regular file.
    """

    if not Path(value).is_file():
        raise ConfigConflictError(f"There is no cache at `{value}'")
    return draft.evolve(caches=(*draft.caches, value))


def handle_clamp_low(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Set the start of the read window."""

    return draft.evolve(clamp_start=resolve_clamp(value))


def handle_clamp_top(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Set the end of the read window."""

    return draft.evolve(clamp_end=resolve_clamp(value))


def handle_types(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Resolve a ``--types`` selection."""

    return apply_lint_types(draft, value)


def handle_output(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Register an ``-o`` sink, overriding the defaults."""

    return apply_output_pair(draft, value, add_to_defaults=False)


def handle_add_output(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Register an ``-O`` sink on top of the defaults."""

    return apply_output_pair(draft, value, add_to_defaults=True)


def handle_config(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Record a ``formatter:key[=value]`` override."""

    return apply_config_pair(draft, value)


def handle_progress(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Swap the sinks for the progress bar set."""

    del value
    return apply_sink_preset(draft, PROGRESS_SINKS)


def handle_no_progress(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Swap the sinks for the plain report set."""

    del value
    return apply_sink_preset(draft, DEFAULT_SINKS)


def handle_merge_directories(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Enable duplicate directory detection and the options it relies on.

    Hidden files and hardlink duplicates are pulled in; later switches may
    still turn them off again.
    """

    del value
    return draft.evolve(merge_directories=True, find_hardlinked_dupes=True, ignore_hidden=False)


def handle_newer_than(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Filter on files modified after a literal timestamp."""

    return apply_timestamp(draft, value, now=draft.reference_time)


def handle_newer_than_stamp(draft: ConfigDraft, value: str) -> ConfigDraft:
    """Filter on files modified after the stamp stored in a file."""

    return apply_timestamp_file(draft, value, now=draft.reference_time)


__all__ = [
    "OptionHandler",
    "PARANOIA_RANGE_MESSAGE",
    "handle_add_output",
    "handle_algorithm",
    "handle_cache",
    "handle_clamp_low",
    "handle_clamp_top",
    "handle_config",
    "handle_less_paranoid",
    "handle_loud",
    "handle_merge_directories",
    "handle_newer_than",
    "handle_newer_than_stamp",
    "handle_no_progress",
    "handle_output",
    "handle_paranoid",
    "handle_paranoid_mem",
    "handle_progress",
    "handle_quiet",
    "handle_size_limits",
    "handle_types",
    "integer_field",
    "set_flag",
    "string_field",
]
