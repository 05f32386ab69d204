# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve modification-time filters from timestamps and stamp files."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Final

from .constants import ISO8601_CONFIG_KEY, STAMP_FORMATTER
from .errors import TimestampError, TimestampErrorReason
from .models import ConfigDraft, TimeFilter
from .outputs import add_sink_config, register_sink

ISO8601_MARKER: Final[str] = "T"
NEWER_THAN_OPTION: Final[str] = "--newer-than"
NEWER_THAN_STAMP_OPTION: Final[str] = "--newer-than-stamp"

_PLAIN_PREFIX: Final[re.Pattern[str]] = re.compile(r"^\s*[+-]?\d+")
_ISO8601_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    ^\s*
    (?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    T
    (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})
    (?:[.,](?P<fraction>\d+))?
    (?P<zone>Z|[+-]\d{2}(?::?\d{2})?)?
    \s*$
    """,
    re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class ResolvedTimestamp:
    """Outcome of resolving a timestamp specifier.

    Attributes:
        instant: Seconds since the epoch.
        plain: ``True`` when the input was plain epoch seconds.
        in_future: ``True`` when ``instant`` lies after the reference time.
    """

    instant: int
    plain: bool
    in_future: bool


def is_plain_timestamp(spec: str) -> bool:
    """Return ``True`` when ``spec`` is plain epoch seconds rather than ISO-8601."""

    return ISO8601_MARKER not in spec


def parse_plain_timestamp(spec: str) -> int:
    """Return the leading integer of ``spec``, or ``0`` when there is none."""

    match = _PLAIN_PREFIX.match(spec)
    return int(match.group(0)) if match else 0


def parse_iso8601(spec: str) -> int:
    """Return epoch seconds for an ISO-8601 ``YYYY-MM-DDThh:mm:ss[.fff]Z`` stamp.

    A missing zone designator is read as UTC. Fractional seconds are dropped.

    Args:
        spec: ISO-8601 timestamp text.

    Returns:
        int: Seconds since the epoch, or ``0`` when ``spec`` does not parse.
    """

    match = _ISO8601_PATTERN.match(spec)
    if match is None:
        return 0
    try:
        stamp = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            tzinfo=_parse_zone(match.group("zone")),
        )
    except ValueError:
        return 0
    return int(stamp.timestamp())


def _parse_zone(zone: str | None) -> timezone:
    """Return the tzinfo for an ISO-8601 zone designator."""

    if zone is None or zone == "Z":
        return timezone.utc
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4] or 0)
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def format_iso8601(instant: float) -> str:
    """Return ``instant`` rendered as ``YYYY-MM-DDThh:mm:ss.fffZ`` in UTC."""

    stamp = datetime.fromtimestamp(instant, tz=timezone.utc)
    return stamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{stamp.microsecond // 1000:03d}Z"


def resolve_timestamp(spec: str, *, now: float | None = None) -> ResolvedTimestamp:
    """Return the instant described by ``spec``.

    Args:
        spec: Plain epoch seconds or an ISO-8601 timestamp.
        now: Reference time used for the future check; defaults to the clock.

    Returns:
        ResolvedTimestamp: Parsed instant with its notation and future flag.

    Raises:
        TimestampError: If ``spec`` does not resolve to a positive instant.
    """

    plain = is_plain_timestamp(spec)
    instant = parse_plain_timestamp(spec) if plain else parse_iso8601(spec)
    if instant <= 0:
        raise TimestampError(
            TimestampErrorReason.UNPARSABLE_TIMESTAMP,
            f'Unable to parse time spec "{spec}"',
        )
    reference = time.time() if now is None else now
    return ResolvedTimestamp(instant=instant, plain=plain, in_future=instant > reference)


def apply_timestamp(
    draft: ConfigDraft,
    spec: str,
    *,
    now: float | None = None,
    option: str = NEWER_THAN_OPTION,
) -> ConfigDraft:
    """Return ``draft`` filtering on files modified after ``spec``.

    Args:
        draft: Configuration draft being built.
        spec: Plain epoch seconds or an ISO-8601 timestamp.
        now: Reference time used for the future check.
        option: Option name quoted in the future-time notice.

    Returns:
        ConfigDraft: Draft with the time filter enabled.

    Raises:
        TimestampError: If ``spec`` cannot be parsed.
    """

    reference = time.time() if now is None else now
    resolved = resolve_timestamp(spec, now=reference)
    draft = draft.evolve(time_filter=TimeFilter(enabled=True, min_mtime=resolved.instant))
    if resolved.in_future:
        draft = draft.with_notice(
            f"{option} {spec} is newer than current time ({format_iso8601(reference)}).",
        )
    return draft


def read_stamp_file(path: Path) -> str:
    """Return the stripped first line of the stamp file at ``path``.

    Args:
        path: Stamp file written by a previous run.

    Returns:
        str: Timestamp text found on the first line.

    Raises:
        TimestampError: If the file cannot be opened or is empty.
    """

    try:
        with path.open(encoding="utf-8") as handle:
            first_line = handle.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise TimestampError(
            TimestampErrorReason.CANNOT_READ_STAMP_FILE,
            f"Cannot read stamp file {path}: {exc}",
        ) from exc
    stamp = first_line.strip()
    if not stamp:
        raise TimestampError(
            TimestampErrorReason.CANNOT_READ_STAMP_FILE,
            f"Stamp file {path} is empty",
        )
    return stamp


def apply_timestamp_file(draft: ConfigDraft, path: str, *, now: float | None = None) -> ConfigDraft:
    """Return ``draft`` filtering on the stamp stored at ``path``.

    On success a ``stamp`` sink is registered so the current time is written
    back to ``path`` after the run, in the notation the file already used.
    An unreadable file only produces a notice and leaves time filtering off.

    Args:
        draft: Configuration draft being built.
        path: Location of the stamp file.
        now: Reference time used for the future check.

    Returns:
        ConfigDraft: Updated draft.

    Raises:
        TimestampError: If the file was read but its content does not parse.
    """

    draft = draft.evolve(time_filter=TimeFilter())
    try:
        stamp = read_stamp_file(Path(path))
    except TimestampError as exc:
        return draft.with_notice(str(exc))

    draft = apply_timestamp(draft, stamp, now=now, option=NEWER_THAN_STAMP_OPTION)
    draft = register_sink(draft, STAMP_FORMATTER, path)
    if not is_plain_timestamp(stamp):
        draft = add_sink_config(draft, STAMP_FORMATTER, ISO8601_CONFIG_KEY, "true")
    return draft


__all__ = [
    "ISO8601_MARKER",
    "NEWER_THAN_OPTION",
    "NEWER_THAN_STAMP_OPTION",
    "ResolvedTimestamp",
    "apply_timestamp",
    "apply_timestamp_file",
    "format_iso8601",
    "is_plain_timestamp",
    "parse_iso8601",
    "parse_plain_timestamp",
    "read_stamp_file",
    "resolve_timestamp",
]
