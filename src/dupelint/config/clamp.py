# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve ``--clamp-low``/``--clamp-top`` values into clamp boundaries."""

from __future__ import annotations

import re
from typing import Final

from .errors import ClampError, SizeSpecError
from .models import AbsoluteClamp, FractionalClamp
from .sizes import parse_size

PERCENT_SUFFIX: Final[str] = "%"

_FACTOR_PREFIX: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))(?P<rest>.*)$",
    re.DOTALL,
)


def is_fractional_spec(spec: str) -> bool:
    """Return whether ``spec`` denotes a fraction rather than a byte offset.

    Args:
        spec: Raw clamp value.

    Returns:
        bool: ``True`` when ``spec`` contains a decimal point or ends with ``%``.
    """

    return "." in spec or spec.endswith(PERCENT_SUFFIX)


def parse_clamp_factor(spec: str) -> float:
    """Return the fraction in ``[0, 1]`` described by ``spec``.

    Args:
        spec: Decimal factor, optionally suffixed with ``%``.

    Returns:
        float: Ratio of the file size.

    Raises:
        ClampError: If the text is malformed or the factor is outside ``[0, 1]``.
    """

    match = _FACTOR_PREFIX.match(spec)
    if match is None:
        raise ClampError(f'Unable to parse factor "{spec}": error begins at {spec}')
    rest = match.group("rest")
    if rest not in ("", PERCENT_SUFFIX):
        raise ClampError(f'Unable to parse factor "{spec}": error begins at {rest}')

    factor = float(match.group("number"))
    if rest == PERCENT_SUFFIX:
        factor /= 100
    if not 0 <= factor <= 1:
        raise ClampError(f"factor value is not in range [0-1]: {factor:f}")
    return factor


def resolve_clamp(spec: str) -> AbsoluteClamp | FractionalClamp:
    """Return the clamp boundary described by ``spec``.

    Args:
        spec: Raw value of ``--clamp-low`` or ``--clamp-top``.

    Returns:
        AbsoluteClamp | FractionalClamp: Exactly one representation, chosen
        from the shape of ``spec``.

    Raises:
        ClampError: If ``spec`` is neither a valid factor nor a valid size.
    """

    if is_fractional_spec(spec):
        return FractionalClamp(ratio=parse_clamp_factor(spec))
    try:
        offset = parse_size(spec)
    except SizeSpecError as exc:
        raise ClampError(f'Unable to parse offset "{spec}": {exc}') from exc
    return AbsoluteClamp(offset=offset)


__all__ = ["PERCENT_SUFFIX", "is_fractional_spec", "parse_clamp_factor", "resolve_clamp"]
