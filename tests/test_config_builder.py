# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests for resolving argument vectors into configurations."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from dupelint import build_configuration
from dupelint.cli.core.config_builder import fold_arguments, initial_draft
from dupelint.cli.core.shared import build_cli_logger
from dupelint.config.constants import HashAlgorithm, Verbosity
from dupelint.config.errors import ConfigConflictError, NoValidPathsError, OptionSyntaxError
from dupelint.config.models import FractionalClamp, OutputSinkRegistration


def _build(argv: list[str], fixed_now: float, **kwargs):
    kwargs.setdefault("interactive", False)
    return build_configuration(argv, now=fixed_now, logger=build_cli_logger(emoji=False, debug=True), **kwargs)


def _settings(config) -> dict[str, object]:
    return config.model_dump(exclude={"command_line"})


def test_defaults_without_arguments(scan_root: Path, fixed_now: float) -> None:
    config = _build([], fixed_now)

    assert config.threads == 16
    assert config.depth == 2048
    assert config.checksum_type is HashAlgorithm.SPOOKY
    assert config.verbosity is Verbosity.WARNING
    assert config.clamp_start == FractionalClamp(ratio=0.0)
    assert config.clamp_end == FractionalClamp(ratio=1.0)
    assert not config.time_filter.enabled
    assert config.working_directory == f"{os.getcwd()}{os.sep}"
    assert config.command_line == "dupelint"
    assert [entry.path for entry in config.paths] == [os.path.realpath(scan_root)]


def test_default_sinks_are_registered_in_order(scan_root: Path, fixed_now: float) -> None:
    config = _build(["a"], fixed_now)
    assert config.outputs == (
        OutputSinkRegistration(formatter="pretty", target="stdout"),
        OutputSinkRegistration(formatter="summary", target="stdout"),
        OutputSinkRegistration(formatter="sh", target="dupelint.sh"),
    )


def test_full_command_line(scan_root: Path, fixed_now: float) -> None:
    argv = [
        "-t",
        "4",
        "--types=defaults,-ef",
        "-s",
        "1k-1M",
        "-q",
        "10%",
        "-Q",
        "0.9",
        "-pp",
        "-o",
        "json:out.json",
        "-c",
        "json:oneline",
        "--newer-than",
        "1700000000",
        "-frb",
        "a",
        "//",
        "b",
    ]
    config = _build(argv, fixed_now)

    assert config.threads == 4
    assert config.list_empty_files is False
    assert (config.min_size, config.max_size) == (1000, 1_000_000)
    assert config.clamp_start == FractionalClamp(ratio=0.1)
    assert config.checksum_type is HashAlgorithm.SHA512
    assert config.outputs == (OutputSinkRegistration(formatter="json", target="out.json"),)
    assert config.sink_config("json") == {"oneline": "1"}
    assert config.time_filter.min_mtime == 1_700_000_000
    assert config.follow_links and not config.ignore_hidden and config.match_basename
    assert [(Path(entry.path).name, entry.is_preferred) for entry in config.paths] == [("a", False), ("b", True)]
    assert [Path(entry.path).name for entry in config.preferred_paths] == ["b"]
    assert config.command_line == "dupelint " + " ".join(argv)


@pytest.mark.parametrize(
    "flag",
    ["-k", "-K", "-m", "-M", "-l", "-L", "-f", "-F", "-x", "-X", "-W", "-r", "-R", "-D", "-U", "--xattr-read", "-g"],
)
def test_repeating_a_flag_is_idempotent(scan_root: Path, fixed_now: float, flag: str) -> None:
    once = _build([flag, "a"], fixed_now)
    twice = _build([flag, flag, "a"], fixed_now)
    assert _settings(once) == _settings(twice)


@pytest.mark.parametrize("option", [["-a", "md5"], ["-T", "minimal"], ["-S", "a"], ["-q", "4k"], ["-o", "csv"]])
def test_repeating_a_valued_option_is_idempotent(scan_root: Path, fixed_now: float, option: list[str]) -> None:
    once = _build([*option, "a"], fixed_now)
    twice = _build([*option, *option, "a"], fixed_now)
    if option[0] == "-o":
        assert twice.outputs == (*once.outputs, *once.outputs)
    else:
        assert _settings(once) == _settings(twice)


def test_later_switch_overrides_merge_directory_side_effects(scan_root: Path, fixed_now: float) -> None:
    config = _build(["-D", "-R", "a"], fixed_now)
    assert config.merge_directories
    assert config.ignore_hidden


def test_keep_all_conflict_is_fatal(scan_root: Path, fixed_now: float) -> None:
    with pytest.raises(ConfigConflictError):
        _build(["-kK"], fixed_now)


def test_unknown_option_is_fatal(scan_root: Path, fixed_now: float) -> None:
    with pytest.raises(OptionSyntaxError):
        _build(["--frobnicate"], fixed_now)


def test_verbosity_steps_and_clamps(scan_root: Path, fixed_now: float) -> None:
    assert _build(["-v"], fixed_now).verbosity is Verbosity.INFO
    assert _build(["-vvvvvv"], fixed_now).verbosity is Verbosity.DEBUG
    assert _build(["-VVVVV"], fixed_now).verbosity is Verbosity.CRITICAL


def test_notices_are_logged_as_warnings(scan_root: Path, fixed_now: float, capsys: pytest.CaptureFixture[str]) -> None:
    _build(["-T", "bogus", "a", "missing"], fixed_now)

    err = capsys.readouterr().err
    assert "lint type 'bogus' not recognised" in err
    assert 'Can\'t open directory or file "missing"' in err


def test_quiet_suppresses_warnings(scan_root: Path, fixed_now: float, capsys: pytest.CaptureFixture[str]) -> None:
    _build(["-V", "-T", "bogus"], fixed_now)
    assert "bogus" not in capsys.readouterr().err


def test_debug_traces_each_option(scan_root: Path, fixed_now: float, capsys: pytest.CaptureFixture[str]) -> None:
    _build(["-vv", "-t", "3"], fixed_now)
    err = capsys.readouterr().err
    assert "option=--threads" in err


def test_path_warnings_are_emitted_before_fatal_error(
    scan_root: Path,
    fixed_now: float,
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(NoValidPathsError):
        _build(["missing"], fixed_now)
    assert '"missing"' in capsys.readouterr().err


def test_stdin_paths(scan_root: Path, fixed_now: float) -> None:
    config = _build(["-"], fixed_now, stdin=io.StringIO(f"{scan_root / 'b'}\n"))
    assert [Path(entry.path).name for entry in config.paths] == ["b"]


def test_fold_arguments_defers_path_resolution(scan_root: Path, fixed_now: float) -> None:
    logger = build_cli_logger(emoji=False)
    draft = fold_arguments(["a", "-v", "missing"], initial_draft([], now=fixed_now), logger=logger)
    assert draft.positionals == ("a", "missing")
    assert draft.verbosity_count == 3
