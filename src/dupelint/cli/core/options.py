# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Declarative option schema consumed by the command-line tokenizer."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from ._option_handlers import (
    OptionHandler,
    handle_add_output,
    handle_algorithm,
    handle_cache,
    handle_clamp_low,
    handle_clamp_top,
    handle_config,
    handle_less_paranoid,
    handle_loud,
    handle_merge_directories,
    handle_newer_than,
    handle_newer_than_stamp,
    handle_no_progress,
    handle_output,
    handle_paranoid,
    handle_paranoid_mem,
    handle_progress,
    handle_quiet,
    handle_size_limits,
    handle_types,
    integer_field,
    set_flag,
    string_field,
)


class OptionArity(str, Enum):
    """Describe whether an option consumes a value."""

    FLAG = "flag"
    VALUE = "value"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Single schema record binding option names to their handler."""

    long: str
    short: str | None
    arity: OptionArity
    handler: OptionHandler
    help: str
    metavar: str | None = None

    @property
    def takes_value(self) -> bool:
        """Return ``True`` when the option consumes a value."""

        return self.arity is OptionArity.VALUE

    @property
    def display_names(self) -> str:
        """Return the option names rendered as ``-x, --long``."""

        names = [f"-{self.short}"] if self.short else []
        names.append(f"--{self.long}")
        return ", ".join(names)


def _value(long: str, short: str | None, handler: OptionHandler, help_text: str, metavar: str) -> OptionSpec:
    return OptionSpec(long, short, OptionArity.VALUE, handler, help_text, metavar)


def _flag(long: str, short: str | None, handler: OptionHandler, help_text: str) -> OptionSpec:
    return OptionSpec(long, short, OptionArity.FLAG, handler, help_text)


def _switch(long: str, short: str | None, field_name: str, enabled: bool, help_text: str) -> OptionSpec:
    return _flag(long, short, set_flag(field_name, enabled), help_text)


OPTION_TABLE: Final[tuple[OptionSpec, ...]] = (
    # Options taking a value.
    _value("threads", "t", integer_field("threads", "threads"), "Specify max number of threads", "N"),
    _value("max-depth", "d", integer_field("max-depth", "depth"), "Specify max traversal depth", "N"),
    _value("sortcriteria", "S", string_field("sort_criteria"), "Original criteria", "[amp]"),
    _value("types", "T", handle_types, "Specify lint types", "T"),
    _value("size", "s", handle_size_limits, "Specify size limits", "m-M"),
    _value("algorithm", "a", handle_algorithm, "Choose hash algorithm", "A"),
    _value("output", "o", handle_output, "Add output (override default)", "FMT[:PATH]"),
    _value("add-output", "O", handle_add_output, "Add output (add to defaults)", "FMT[:PATH]"),
    _value("max-paranoid-mem", "u", handle_paranoid_mem, "Memory budget for paranoid hashing", "S"),
    _value("newer-than-stamp", "n", handle_newer_than_stamp, "Newer than stamp file", "PATH"),
    _value("newer-than", "N", handle_newer_than, "Newer than timestamp", "STAMP"),
    _value("clamp-low", "q", handle_clamp_low, "Limit lower reading barrier", "P"),
    _value("clamp-top", "Q", handle_clamp_top, "Limit upper reading barrier", "P"),
    _value("config", "c", handle_config, "Configure a formatter", "FMT:K[=V]"),
    _value("cache", "C", handle_cache, "Add json cache file", "PATH"),
    # Switches with behaviour.
    _flag("progress", "g", handle_progress, "Enable progressbar"),
    _flag("no-progress", "G", handle_no_progress, "Disable progressbar"),
    _flag("loud", "v", handle_loud, "Be more verbose (-vvv for more)"),
    _flag("quiet", "V", handle_quiet, "Be less verbose (-VVV for less)"),
    _flag("paranoid", "p", handle_paranoid, "Use more paranoid hashing"),
    _flag("less-paranoid", "P", handle_less_paranoid, "Use less paranoid hashing"),
    _flag("merge-directories", "D", handle_merge_directories, "Find duplicate directories"),
    # Boolean pairs.
    _switch("with-color", "w", "color", True, "Be colorful"),
    _switch("no-with-color", "W", "color", False, "Be not that colorful"),
    _switch("hidden", "r", "ignore_hidden", False, "Find hidden files"),
    _switch("no-hidden", "R", "ignore_hidden", True, "Ignore hidden files"),
    _switch("followlinks", "f", "follow_links", True, "Follow symlinks"),
    _switch("no-followlinks", "F", "follow_links", False, "Ignore symlinks"),
    _switch("see-symlinks", "@", "see_symlinks", True, "Treat symlinks as regular files"),
    _switch("crossdev", "x", "same_partition", True, "Do not cross mountpoints"),
    _switch("no-crossdev", "X", "same_partition", False, "Cross mountpoints"),
    _switch("keep-all-tagged", "k", "keep_all_tagged", True, "Keep all tagged files"),
    _switch("keep-all-untagged", "K", "keep_all_untagged", True, "Keep all untagged files"),
    _switch("must-match-tagged", "m", "must_match_tagged", True, "Must have twin in tagged dir"),
    _switch("must-match-untagged", "M", "must_match_untagged", True, "Must have twin in untagged dir"),
    _switch("hardlinked", "l", "find_hardlinked_dupes", True, "Report hardlinks as duplicates"),
    _switch("no-hardlinked", "L", "find_hardlinked_dupes", False, "Ignore hardlinks"),
    _switch("match-basename", "b", "match_basename", True, "Only find twins with same basename"),
    _switch("no-match-basename", "B", "match_basename", False, "Do not require the same basename"),
    _switch("match-extension", "e", "match_with_extension", True, "Only find twins with same extension"),
    _switch("no-match-extension", "E", "match_with_extension", False, "Do not require the same extension"),
    _switch(
        "match-without-extension",
        "i",
        "match_without_extension",
        True,
        "Only find twins with same basename minus extension",
    ),
    _switch(
        "no-match-without-extension",
        "I",
        "match_without_extension",
        False,
        "Do not require the same basename minus extension",
    ),
    _switch("xattr-write", None, "write_checksum_to_xattr", True, "Cache checksum in file attributes"),
    _switch("no-xattr-write", None, "write_checksum_to_xattr", False, "Do not cache checksums in file attributes"),
    _switch("xattr-read", None, "read_checksum_from_xattr", True, "Read cached checksums from file attributes"),
    _switch("no-xattr-read", None, "read_checksum_from_xattr", False, "Ignore checksums cached in file attributes"),
    _switch("write-unfinished", "U", "write_unfinished", True, "Output unfinished checksums"),
)


@dataclass(frozen=True, slots=True)
class OptionSchema:
    """Ordered option records with lookup tables for long and short names."""

    options: tuple[OptionSpec, ...]
    _by_long: dict[str, OptionSpec] = field(init=False, repr=False, compare=False)
    _by_short: dict[str, OptionSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the lookup tables and reject duplicate names.

        Raises:
            ValueError: If two records share a long or short name.
        """

        by_long: dict[str, OptionSpec] = {}
        by_short: dict[str, OptionSpec] = {}
        for spec in self.options:
            if spec.long in by_long:
                raise ValueError(f"duplicate long option --{spec.long}")
            by_long[spec.long] = spec
            if spec.short is None:
                continue
            if spec.short in by_short:
                raise ValueError(f"duplicate short option -{spec.short}")
            by_short[spec.short] = spec
        object.__setattr__(self, "_by_long", by_long)
        object.__setattr__(self, "_by_short", by_short)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def find_long(self, name: str) -> OptionSpec | None:
        """Return the record registered under ``--name``."""

        return self._by_long.get(name)

    def find_short(self, name: str) -> OptionSpec | None:
        """Return the record registered under ``-name``."""

        return self._by_short.get(name)


def build_option_schema(options: Sequence[OptionSpec] = OPTION_TABLE) -> OptionSchema:
    """Return a schema for ``options``."""

    return OptionSchema(tuple(options))


OPTION_SCHEMA: Final[OptionSchema] = build_option_schema()


__all__ = [
    "OPTION_SCHEMA",
    "OPTION_TABLE",
    "OptionArity",
    "OptionSchema",
    "OptionSpec",
    "build_option_schema",
]
