# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while resolving command-line configuration."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class ConfigError(Exception):
    """Raised when configuration input is invalid and resolution must stop."""


class SizeSpecErrorReason(str, Enum):
    """Enumerate the ways a size specifier or size range can be rejected."""

    NOT_A_NUMBER = "not_a_number"
    NEGATIVE_SIZE = "negative_size"
    UNKNOWN_UNIT = "unknown_unit"
    RANGE_INVERTED = "range_inverted"


_SIZE_MESSAGES: dict[SizeSpecErrorReason, str] = {
    SizeSpecErrorReason.NOT_A_NUMBER: "This does not look like a number",
    SizeSpecErrorReason.NEGATIVE_SIZE: "Negative sizes are not allowed",
    SizeSpecErrorReason.UNKNOWN_UNIT: "Given format specifier not found",
    SizeSpecErrorReason.RANGE_INVERTED: "Max is smaller than min",
}


class SizeSpecError(ConfigError):
    """Raised when a size specifier or size range cannot be interpreted."""

    def __init__(self, reason: SizeSpecErrorReason, spec: str) -> None:
        """Initialise the error with the rejection reason and offending text.

        Args:
            reason: Classification of the parse failure.
            spec: Raw specifier supplied by the user.
        """

        super().__init__(_SIZE_MESSAGES[reason])
        self.reason = reason
        self.spec = spec


class ClampError(ConfigError):
    """Raised when a clamp offset or factor is malformed or out of range."""


class TimestampErrorReason(str, Enum):
    """Enumerate timestamp resolution failures."""

    UNPARSABLE_TIMESTAMP = "unparsable_timestamp"
    CANNOT_READ_STAMP_FILE = "cannot_read_stamp_file"


class TimestampError(ConfigError):
    """Raised when a timestamp or stamp file cannot be resolved."""

    def __init__(self, reason: TimestampErrorReason, message: str) -> None:
        """Initialise the error with a reason and a human-readable message.

        Args:
            reason: Classification of the failure.
            message: Text shown to the user.
        """

        super().__init__(message)
        self.reason = reason


class OptionSyntaxError(ConfigError):
    """Raised when a command-line token does not fit the option schema."""


class ConfigConflictError(ConfigError):
    """Raised when option values contradict each other or are unsupported."""


class NoValidPathsError(ConfigError):
    """Raised when every supplied path was inaccessible."""

    def __init__(self, notices: Sequence[str] = ()) -> None:
        """Initialise the error with the warnings raised for skipped paths.

        Args:
            notices: Messages describing each inaccessible path.
        """

        super().__init__("No valid paths given.")
        self.notices = tuple(notices)


__all__ = [
    "ClampError",
    "ConfigConflictError",
    "ConfigError",
    "NoValidPathsError",
    "OptionSyntaxError",
    "SizeSpecError",
    "SizeSpecErrorReason",
    "TimestampError",
    "TimestampErrorReason",
]
