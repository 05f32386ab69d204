# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the schema-driven tokenizer and the option schema."""

from __future__ import annotations

import pytest

from dupelint.cli.core.options import OPTION_SCHEMA, OPTION_TABLE, OptionArity, build_option_schema
from dupelint.cli.core.tokenizer import OptionToken, PositionalToken, tokenize
from dupelint.config.errors import OptionSyntaxError


def _summary(argv: list[str]) -> list[tuple[str, str]]:
    summary: list[tuple[str, str]] = []
    for token in tokenize(argv):
        if isinstance(token, OptionToken):
            summary.append((token.spec.long, token.value))
        else:
            summary.append(("<path>", token.value))
    return summary


def test_long_option_forms() -> None:
    assert _summary(["--threads", "4", "--max-depth=7"]) == [("threads", "4"), ("max-depth", "7")]


def test_short_option_forms() -> None:
    assert _summary(["-t", "4", "-d7"]) == [("threads", "4"), ("max-depth", "7")]


def test_clustered_switches() -> None:
    assert _summary(["-vvk"]) == [("loud", ""), ("loud", ""), ("keep-all-tagged", "")]


def test_cluster_ending_in_value_option() -> None:
    assert _summary(["-vt8"]) == [("loud", ""), ("threads", "8")]
    assert _summary(["-vt", "8"]) == [("loud", ""), ("threads", "8")]


def test_positionals_are_interleaved() -> None:
    assert _summary(["a", "-v", "//", "b", "-"]) == [
        ("<path>", "a"),
        ("loud", ""),
        ("<path>", "//"),
        ("<path>", "b"),
        ("<path>", "-"),
    ]


def test_double_dash_ends_option_parsing() -> None:
    tokens = list(tokenize(["-v", "--", "-k", "--threads"]))
    assert isinstance(tokens[0], OptionToken)
    assert tokens[1:] == [PositionalToken("-k"), PositionalToken("--threads")]


def test_value_may_look_like_an_option() -> None:
    assert _summary(["--types", "-ef"]) == [("types", "-ef")]


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["--bogus"], "Unknown option --bogus"),
        (["-Z"], "Unknown option -Z"),
        (["-vZ"], "Unknown option -Z"),
        (["--threads"], "Missing argument for --threads"),
        (["-t"], "Missing argument for -t"),
        (["--loud=3"], "does not take a value"),
    ],
)
def test_syntax_errors(argv: list[str], message: str) -> None:
    with pytest.raises(OptionSyntaxError, match=message):
        list(tokenize(argv))


def test_schema_names_are_unique_and_complete() -> None:
    assert len(OPTION_SCHEMA) == len(OPTION_TABLE)
    assert OPTION_SCHEMA.find_short("@") is not None
    assert OPTION_SCHEMA.find_long("xattr-read") is not None
    assert OPTION_SCHEMA.find_long("xattr-read").short is None


def test_schema_rejects_duplicates() -> None:
    with pytest.raises(ValueError, match="duplicate long option"):
        build_option_schema((*OPTION_TABLE, OPTION_TABLE[0]))


def test_value_options_declare_metavars() -> None:
    for spec in OPTION_SCHEMA:
        assert (spec.metavar is not None) == (spec.arity is OptionArity.VALUE)
