# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models produced by the command-line resolution engine."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_CONFIG_VALUE,
    DEFAULT_DEPTH,
    DEFAULT_PARANOID_MEM,
    DEFAULT_SORT_CRITERIA,
    DEFAULT_THREADS,
    DEFAULT_VERBOSITY_COUNT,
    MAX_SIZE,
    STDOUT_TARGET,
    HashAlgorithm,
    Verbosity,
    verbosity_from_count,
)


class AbsoluteClamp(BaseModel):
    """Clamp boundary expressed as an absolute byte offset."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["absolute"] = "absolute"
    offset: int = Field(ge=0)


class FractionalClamp(BaseModel):
    """Clamp boundary expressed as a fraction of the file size."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fractional"] = "fractional"
    ratio: float = Field(ge=0.0, le=1.0)


ClampBoundary = Annotated[AbsoluteClamp | FractionalClamp, Field(discriminator="kind")]


class TimeFilter(BaseModel):
    """Modification-time filter resolved from ``--newer-than`` style flags."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    min_mtime: int = 0


class PathEntry(BaseModel):
    """Canonical input path tagged with its preferred-group membership."""

    model_config = ConfigDict(frozen=True)

    path: str
    is_preferred: bool = False


class OutputSinkRegistration(BaseModel):
    """Formatter registered to receive scan results at ``target``."""

    model_config = ConfigDict(frozen=True)

    formatter: str
    target: str = STDOUT_TARGET


class SinkConfigOverride(BaseModel):
    """Formatter-scoped configuration key/value pair."""

    model_config = ConfigDict(frozen=True)

    formatter: str
    key: str
    value: str = DEFAULT_CONFIG_VALUE


class LintCategory(str, Enum):
    """Enumerate the atomic lint categories and the flag each one drives."""

    BAD_IDS = "find_bad_ids"
    BAD_LINKS = "find_bad_links"
    EMPTY_DIRS = "find_empty_dirs"
    EMPTY_FILES = "list_empty_files"
    NON_STRIPPED = "find_nonstripped"
    DUPLICATES = "search_duplicates"
    DUPLICATE_DIRS = "merge_directories"

    @property
    def field_name(self) -> str:
        """Return the configuration field toggled by this category."""

        return self.value


class _SettingsFields(BaseModel):
    """Fields shared by the mutable draft and the frozen configuration."""

    threads: int = DEFAULT_THREADS
    depth: int = DEFAULT_DEPTH
    min_size: int = 0
    max_size: int = MAX_SIZE
    limits_specified: bool = False

    follow_links: bool = False
    see_symlinks: bool = True
    same_partition: bool = False
    ignore_hidden: bool = True
    find_hardlinked_dupes: bool = False
    match_basename: bool = False
    match_with_extension: bool = False
    match_without_extension: bool = False
    keep_all_tagged: bool = False
    keep_all_untagged: bool = False
    must_match_tagged: bool = False
    must_match_untagged: bool = False
    read_checksum_from_xattr: bool = False
    write_checksum_to_xattr: bool = False
    write_unfinished: bool = False
    color: bool = True

    find_bad_ids: bool = True
    find_bad_links: bool = True
    find_empty_dirs: bool = True
    list_empty_files: bool = True
    find_nonstripped: bool = False
    search_duplicates: bool = True
    merge_directories: bool = False

    checksum_type: HashAlgorithm = DEFAULT_ALGORITHM
    paranoia: int = 0
    paranoid_mem: int = DEFAULT_PARANOID_MEM
    sort_criteria: str = DEFAULT_SORT_CRITERIA

    clamp_start: ClampBoundary = Field(default_factory=lambda: FractionalClamp(ratio=0.0))
    clamp_end: ClampBoundary = Field(default_factory=lambda: FractionalClamp(ratio=1.0))
    time_filter: TimeFilter = Field(default_factory=TimeFilter)

    outputs: tuple[OutputSinkRegistration, ...] = ()
    output_config: tuple[SinkConfigOverride, ...] = ()
    caches: tuple[str, ...] = ()

    working_directory: str = ""
    command_line: str = ""


UNUSED_COUNTER: Final[int] = -1


class ConfigDraft(_SettingsFields):
    """Partial configuration threaded through every option handler.

    Handlers never mutate a draft in place; they return a copy produced by
    :meth:`evolve`. Bookkeeping fields that only matter while tokens are
    being consumed live here rather than on :class:`Configuration`.
    """

    verbosity_count: int = DEFAULT_VERBOSITY_COUNT
    output_count: int = UNUSED_COUNTER
    add_output_count: int = UNUSED_COUNTER
    preset_outputs: bool = False
    reference_time: float | None = None
    positionals: tuple[str, ...] = ()
    notices: tuple[str, ...] = ()

    @property
    def verbosity(self) -> Verbosity:
        """Return the verbosity level implied by the current counter."""

        return verbosity_from_count(self.verbosity_count)

    def evolve(self, **updates: object) -> ConfigDraft:
        """Return a deep copy of the draft with ``updates`` applied.

        Args:
            **updates: Field overrides applied to the copy.

        Returns:
            ConfigDraft: New draft instance.
        """

        return self.model_copy(update=updates, deep=True)

    def with_notice(self, message: str) -> ConfigDraft:
        """Return a copy of the draft carrying an additional warning notice.

        Args:
            message: Recoverable problem to surface to the user.

        Returns:
            ConfigDraft: New draft with ``message`` appended to ``notices``.
        """

        return self.evolve(notices=(*self.notices, message))


class Configuration(_SettingsFields):
    """Validated, read-only configuration handed to the scanning engines."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    verbosity: Verbosity = Verbosity.WARNING
    paths: tuple[PathEntry, ...] = ()

    @model_validator(mode="after")
    def _check_invariants(self) -> Configuration:
        """Reject configurations that violate cross-field invariants.

        Returns:
            Configuration: The validated instance.

        Raises:
            ValueError: If size limits are inverted or both keep-all rules are set.
        """

        if self.min_size > self.max_size:
            raise ValueError("min_size must not exceed max_size")
        if self.keep_all_tagged and self.keep_all_untagged:
            raise ValueError("keep_all_tagged and keep_all_untagged are mutually exclusive")
        return self

    @property
    def preferred_paths(self) -> tuple[PathEntry, ...]:
        """Return the input paths tagged as preferred originals."""

        return tuple(entry for entry in self.paths if entry.is_preferred)

    def sink_config(self, formatter: str) -> dict[str, str]:
        """Return the configuration overrides for ``formatter``; later keys win.

        Args:
            formatter: Name of the formatter whose overrides are requested.

        Returns:
            dict[str, str]: Mapping of configuration keys to values.
        """

        return {item.key: item.value for item in self.output_config if item.formatter == formatter}


SHARED_FIELDS: Final[frozenset[str]] = frozenset(_SettingsFields.model_fields)


__all__ = [
    "AbsoluteClamp",
    "ClampBoundary",
    "ConfigDraft",
    "Configuration",
    "FractionalClamp",
    "LintCategory",
    "OutputSinkRegistration",
    "PathEntry",
    "SHARED_FIELDS",
    "SinkConfigOverride",
    "TimeFilter",
    "UNUSED_COUNTER",
]
