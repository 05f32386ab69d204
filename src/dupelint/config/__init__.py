# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models, value parsers and the closing validation pass."""

from __future__ import annotations

from .clamp import resolve_clamp
from .constants import HashAlgorithm, Verbosity
from .errors import (
    ClampError,
    ConfigConflictError,
    ConfigError,
    NoValidPathsError,
    OptionSyntaxError,
    SizeSpecError,
    SizeSpecErrorReason,
    TimestampError,
    TimestampErrorReason,
)
from .lint_types import LINT_TYPE_CATALOG, apply_lint_types, fold_lint_types
from .models import (
    AbsoluteClamp,
    ConfigDraft,
    Configuration,
    FractionalClamp,
    LintCategory,
    OutputSinkRegistration,
    PathEntry,
    SinkConfigOverride,
    TimeFilter,
)
from .paths import collect_paths
from .sizes import parse_size, parse_size_range
from .timestamps import resolve_timestamp
from .validation import validate_configuration

__all__ = [
    "AbsoluteClamp",
    "ClampError",
    "ConfigConflictError",
    "ConfigDraft",
    "ConfigError",
    "Configuration",
    "FractionalClamp",
    "HashAlgorithm",
    "LINT_TYPE_CATALOG",
    "LintCategory",
    "NoValidPathsError",
    "OptionSyntaxError",
    "OutputSinkRegistration",
    "PathEntry",
    "SinkConfigOverride",
    "SizeSpecError",
    "SizeSpecErrorReason",
    "TimeFilter",
    "TimestampError",
    "TimestampErrorReason",
    "Verbosity",
    "apply_lint_types",
    "collect_paths",
    "fold_lint_types",
    "parse_size",
    "parse_size_range",
    "resolve_clamp",
    "resolve_timestamp",
    "validate_configuration",
]
