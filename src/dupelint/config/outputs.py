# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for resolving output sink registrations and sink configuration."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .constants import (
    DEFAULT_CONFIG_VALUE,
    DEFAULT_SINKS,
    KNOWN_FORMATTERS,
    STDOUT_TARGET,
)
from .errors import ConfigConflictError
from .models import ConfigDraft, OutputSinkRegistration, SinkConfigOverride

PAIR_SEPARATOR: Final[str] = ":"
VALUE_SEPARATOR: Final[str] = "="
CONFIG_PAIR_FORMAT: Final[str] = "format:key[=val]"


def parse_output_pair(pair: str) -> OutputSinkRegistration:
    """Return the sink registration described by ``formatter[:target]``.

    Args:
        pair: Raw ``-o``/``-O`` value.

    Returns:
        OutputSinkRegistration: Formatter and target; the target defaults to
        standard output when no ``:`` is present.
    """

    formatter, separator, target = pair.partition(PAIR_SEPARATOR)
    if not separator:
        return OutputSinkRegistration(formatter=pair, target=STDOUT_TARGET)
    return OutputSinkRegistration(formatter=formatter, target=target)


def parse_config_pair(pair: str) -> SinkConfigOverride:
    """Return the sink configuration override described by ``formatter:key[=value]``.

    Args:
        pair: Raw ``-c`` value.

    Returns:
        SinkConfigOverride: Parsed override; the value defaults to ``"1"``.

    Raises:
        ValueError: If the formatter separator or the key is missing.
    """

    formatter, separator, remainder = pair.partition(PAIR_SEPARATOR)
    if not separator:
        raise ValueError(f"No format ({CONFIG_PAIR_FORMAT}) specified in '{pair}'.")
    key, has_value, value = remainder.partition(VALUE_SEPARATOR)
    if not key:
        raise ValueError(f"Missing key ({CONFIG_PAIR_FORMAT}) in '{pair}'.")
    return SinkConfigOverride(
        formatter=formatter,
        key=key,
        value=value if has_value else DEFAULT_CONFIG_VALUE,
    )


def is_known_formatter(name: str) -> bool:
    """Return ``True`` when ``name`` is a formatter the output layer provides."""

    return name in KNOWN_FORMATTERS


def register_sink(draft: ConfigDraft, formatter: str, target: str = STDOUT_TARGET) -> ConfigDraft:
    """Return ``draft`` with an additional sink registration appended."""

    sink = OutputSinkRegistration(formatter=formatter, target=target)
    return draft.evolve(outputs=(*draft.outputs, sink))


def add_sink_config(draft: ConfigDraft, formatter: str, key: str, value: str) -> ConfigDraft:
    """Return ``draft`` with an additional sink configuration override appended."""

    override = SinkConfigOverride(formatter=formatter, key=key, value=value)
    return draft.evolve(output_config=(*draft.output_config, override))


def apply_output_pair(draft: ConfigDraft, pair: str, *, add_to_defaults: bool) -> ConfigDraft:
    """Register the sink described by ``pair`` and bump the matching counter.

    ``-o`` and ``-O`` keep independent counters that start below zero. Any
    use of a flag lifts its counter to at least zero, even when registration
    fails, so mixing the two flags can be detected later.

    Args:
        draft: Configuration draft being built.
        pair: Raw ``formatter[:target]`` value.
        add_to_defaults: ``True`` for ``-O`` (add to defaults), ``False`` for ``-o``.

    Returns:
        ConfigDraft: Updated draft; an unknown formatter yields a notice instead
        of a registration.
    """

    counter_field = "add_output_count" if add_to_defaults else "output_count"
    count = max(getattr(draft, counter_field), 0)

    sink = parse_output_pair(pair)
    flag = "-O" if add_to_defaults else "-o"
    if not is_known_formatter(sink.formatter):
        draft = draft.evolve(**{counter_field: count})
        return draft.with_notice(f"Adding {flag} {pair} as output failed.")

    draft = register_sink(draft, sink.formatter, sink.target)
    return draft.evolve(**{counter_field: count + 1})


def apply_config_pair(draft: ConfigDraft, pair: str) -> ConfigDraft:
    """Record the sink configuration override described by ``pair``.

    Args:
        draft: Configuration draft being built.
        pair: Raw ``formatter:key[=value]`` value.

    Returns:
        ConfigDraft: Updated draft; malformed pairs yield a notice only.
    """

    try:
        override = parse_config_pair(pair)
    except ValueError as exc:
        return draft.with_notice(str(exc))
    return add_sink_config(draft, override.formatter, override.key, override.value)


def apply_sink_preset(draft: ConfigDraft, sinks: Iterable[tuple[str, str]]) -> ConfigDraft:
    """Replace every registered sink with ``sinks`` (``--progress`` and friends)."""

    outputs = tuple(OutputSinkRegistration(formatter=name, target=target) for name, target in sinks)
    return draft.evolve(outputs=outputs, preset_outputs=True)


def resolve_outputs(draft: ConfigDraft) -> tuple[OutputSinkRegistration, ...]:
    """Return the final sink list, filling in defaults where required.

    Args:
        draft: Draft after every option has been consumed.

    Returns:
        tuple[OutputSinkRegistration, ...]: Ordered sink registrations.

    Raises:
        ConfigConflictError: If both ``-o`` and ``-O`` were used.
    """

    used_output = draft.output_count >= 0
    used_add_output = draft.add_output_count >= 0
    if used_output and used_add_output:
        raise ConfigConflictError("Specifying both -o and -O is not allowed.")
    if used_output or draft.preset_outputs:
        return draft.outputs

    # Only -O additions and stamp sinks can be present at this point.
    defaults = tuple(OutputSinkRegistration(formatter=name, target=target) for name, target in DEFAULT_SINKS)
    return (*defaults, *draft.outputs)


__all__ = [
    "CONFIG_PAIR_FORMAT",
    "PAIR_SEPARATOR",
    "VALUE_SEPARATOR",
    "add_sink_config",
    "apply_config_pair",
    "apply_output_pair",
    "apply_sink_preset",
    "is_known_formatter",
    "parse_config_pair",
    "parse_output_pair",
    "register_sink",
    "resolve_outputs",
]
