# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parsers for byte-size specifiers (``10M``, ``1.5kb``) and size ranges."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final

from .constants import MAX_SIZE, UNIT_TABLE, UnitTableEntry
from .errors import SizeSpecError, SizeSpecErrorReason

RANGE_SEPARATOR: Final[str] = "-"

_NUMBER_PREFIX: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))(?P<rest>.*)$",
    re.DOTALL,
)
_UNITS_BY_SUFFIX: Final[dict[str, UnitTableEntry]] = {entry.suffix: entry for entry in UNIT_TABLE}


def lookup_unit(suffix: str) -> UnitTableEntry | None:
    """Return the unit table entry for ``suffix`` ignoring case.

    Args:
        suffix: Unit suffix such as ``"kb"`` or ``"M"``.

    Returns:
        UnitTableEntry | None: Matching entry, or ``None`` when the suffix is unknown.
    """

    return _UNITS_BY_SUFFIX.get(suffix.lower())


def parse_size(spec: str) -> int:
    """Return the number of bytes described by ``spec``.

    The grammar is a non-negative decimal (fractions allowed) followed by an
    optional unit suffix from :data:`~dupelint.config.constants.UNIT_TABLE`.
    A bare number is rounded to the nearest byte; a suffixed number is
    multiplied out and truncated. No overflow guard is applied.

    Args:
        spec: Size specifier supplied by the user.

    Returns:
        int: Byte count described by ``spec``.

    Raises:
        SizeSpecError: If ``spec`` is not a number, is negative, or carries an
            unknown unit suffix.
    """

    match = _NUMBER_PREFIX.match(spec)
    if match is None:
        raise SizeSpecError(SizeSpecErrorReason.NOT_A_NUMBER, spec)
    try:
        decimal = Decimal(match.group("number"))
    except InvalidOperation as exc:  # pragma: no cover - the pattern only admits valid literals
        raise SizeSpecError(SizeSpecErrorReason.NOT_A_NUMBER, spec) from exc
    if decimal < 0:
        raise SizeSpecError(SizeSpecErrorReason.NEGATIVE_SIZE, spec)

    suffix = match.group("rest").strip()
    if not suffix:
        return int(decimal.to_integral_value(rounding=ROUND_HALF_UP))

    unit = lookup_unit(suffix)
    if unit is None:
        raise SizeSpecError(SizeSpecErrorReason.UNKNOWN_UNIT, spec)
    return int(decimal * unit.multiplier)


def parse_size_range(spec: str) -> tuple[int, int]:
    """Return the ``(min, max)`` byte range described by ``spec``.

    The text is split on the first ``-``. An empty left side means ``0`` and
    an empty or missing right side means :data:`MAX_SIZE`.

    Args:
        spec: Range specifier such as ``"5k-10k"``, ``"-10k"`` or ``"1M-"``.

    Returns:
        tuple[int, int]: Inclusive lower and upper byte bounds.

    Raises:
        SizeSpecError: If either side fails to parse or the range is inverted.
    """

    lower_text, _, upper_text = spec.partition(RANGE_SEPARATOR)
    minimum = parse_size(lower_text) if lower_text else 0
    maximum = parse_size(upper_text) if upper_text else MAX_SIZE
    if maximum < minimum:
        raise SizeSpecError(SizeSpecErrorReason.RANGE_INVERTED, spec)
    return minimum, maximum


__all__ = ["RANGE_SEPARATOR", "lookup_unit", "parse_size", "parse_size_range"]
