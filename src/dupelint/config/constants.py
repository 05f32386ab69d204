# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Constant values and enumerations shared across configuration resolvers."""

from __future__ import annotations

from enum import Enum
from typing import Final, NamedTuple


class UnitTableEntry(NamedTuple):
    """Describe a byte-size unit suffix as ``base ** exponent``."""

    suffix: str
    base: int
    exponent: int

    @property
    def multiplier(self) -> int:
        """Return the number of bytes represented by one unit."""

        return self.base**self.exponent


# Sorted by suffix; lookups are case-insensitive.
UNIT_TABLE: Final[tuple[UnitTableEntry, ...]] = (
    UnitTableEntry("b", 512, 1),
    UnitTableEntry("c", 1, 1),
    UnitTableEntry("e", 1000, 6),
    UnitTableEntry("eb", 1024, 6),
    UnitTableEntry("g", 1000, 3),
    UnitTableEntry("gb", 1024, 3),
    UnitTableEntry("k", 1000, 1),
    UnitTableEntry("kb", 1024, 1),
    UnitTableEntry("m", 1000, 2),
    UnitTableEntry("mb", 1024, 2),
    UnitTableEntry("p", 1000, 5),
    UnitTableEntry("pb", 1024, 5),
    UnitTableEntry("t", 1000, 4),
    UnitTableEntry("tb", 1024, 4),
    UnitTableEntry("w", 2, 1),
)

PATH_MAX: Final[int] = 4096
MAX_SIZE: Final[int] = 2**64 - 1

MIN_THREADS: Final[int] = 1
MAX_THREADS: Final[int] = 128
DEFAULT_THREADS: Final[int] = 16

MIN_DEPTH: Final[int] = 1
MAX_DEPTH: Final[int] = PATH_MAX // 2 + 1
DEFAULT_DEPTH: Final[int] = PATH_MAX // 2

DEFAULT_PARANOID_MEM: Final[int] = 256 * 1024 * 1024
DEFAULT_SORT_CRITERIA: Final[str] = "m"

STDOUT_TARGET: Final[str] = "stdout"
STAMP_FORMATTER: Final[str] = "stamp"
ISO8601_CONFIG_KEY: Final[str] = "iso8601"
DEFAULT_SCRIPT_NAME: Final[str] = "dupelint.sh"
DEFAULT_CONFIG_VALUE: Final[str] = "1"

KNOWN_FORMATTERS: Final[frozenset[str]] = frozenset(
    {
        "csv",
        "fdupes",
        "json",
        "pretty",
        "progressbar",
        "py",
        "sh",
        STAMP_FORMATTER,
        "summary",
    },
)

DEFAULT_SINKS: Final[tuple[tuple[str, str], ...]] = (
    ("pretty", STDOUT_TARGET),
    ("summary", STDOUT_TARGET),
    ("sh", DEFAULT_SCRIPT_NAME),
)
PROGRESS_SINKS: Final[tuple[tuple[str, str], ...]] = (
    ("progressbar", STDOUT_TARGET),
    ("summary", STDOUT_TARGET),
    ("sh", DEFAULT_SCRIPT_NAME),
)


class HashAlgorithm(str, Enum):
    """Enumerate checksum algorithms understood by the matching engine."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    SPOOKY32 = "spooky32"
    SPOOKY64 = "spooky64"
    SPOOKY = "spooky"
    CITY = "city"
    MURMUR = "murmur"
    BASTARD = "bastard"
    PARANOID = "paranoid"

    @classmethod
    def from_raw(cls, raw: str) -> HashAlgorithm | None:
        """Return the algorithm matching ``raw`` or ``None`` when unknown.

        Args:
            raw: Algorithm name supplied on the command line.

        Returns:
            HashAlgorithm | None: Matching member when recognised.
        """

        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


DEFAULT_ALGORITHM: Final[HashAlgorithm] = HashAlgorithm.SPOOKY

# Paranoia counter to algorithm; ``0`` keeps whatever ``--algorithm`` chose.
PARANOIA_ALGORITHMS: Final[dict[int, HashAlgorithm | None]] = {
    -2: HashAlgorithm.SPOOKY32,
    -1: HashAlgorithm.SPOOKY64,
    0: None,
    1: HashAlgorithm.BASTARD,
    2: HashAlgorithm.SHA512,
    3: HashAlgorithm.PARANOID,
}


class Verbosity(str, Enum):
    """Enumerate the log levels reachable through ``-v``/``-V``."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


VERBOSITY_LADDER: Final[tuple[Verbosity, ...]] = (
    Verbosity.CRITICAL,
    Verbosity.ERROR,
    Verbosity.WARNING,
    Verbosity.INFO,
    Verbosity.DEBUG,
)
DEFAULT_VERBOSITY_COUNT: Final[int] = 2


def verbosity_from_count(count: int) -> Verbosity:
    """Return the verbosity level for ``count`` clamped onto the ladder.

    Args:
        count: Net number of ``-v`` minus ``-V`` flags plus the default.

    Returns:
        Verbosity: Level selected from :data:`VERBOSITY_LADDER`.
    """

    index = min(max(count, 0), len(VERBOSITY_LADDER) - 1)
    return VERBOSITY_LADDER[index]


__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_CONFIG_VALUE",
    "DEFAULT_DEPTH",
    "DEFAULT_PARANOID_MEM",
    "DEFAULT_SCRIPT_NAME",
    "DEFAULT_SINKS",
    "DEFAULT_SORT_CRITERIA",
    "DEFAULT_THREADS",
    "DEFAULT_VERBOSITY_COUNT",
    "HashAlgorithm",
    "ISO8601_CONFIG_KEY",
    "KNOWN_FORMATTERS",
    "MAX_DEPTH",
    "MAX_SIZE",
    "MAX_THREADS",
    "MIN_DEPTH",
    "MIN_THREADS",
    "PARANOIA_ALGORITHMS",
    "PATH_MAX",
    "PROGRESS_SINKS",
    "STAMP_FORMATTER",
    "STDOUT_TARGET",
    "UNIT_TABLE",
    "UnitTableEntry",
    "VERBOSITY_LADDER",
    "Verbosity",
    "verbosity_from_count",
]
