# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for the ``resolve``, ``options`` and ``version`` commands."""

from __future__ import annotations

import json
import os
from pathlib import Path

import click
import pytest
import typer
from typer.testing import CliRunner

from dupelint import logging as dl_logging
from dupelint.cli.app import app
from dupelint.cli.commands.version.command import Feature
from dupelint.logging import ANSI


def test_resolve_prints_configuration_json(scan_root: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "-t", "4", "--types=minimal", "a", "//", "b"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["threads"] == 4
    assert payload["checksum_type"] == "spooky"
    assert payload["verbosity"] == "warning"
    assert payload["list_empty_files"] is False
    assert payload["color"] is False
    assert [sink["formatter"] for sink in payload["outputs"]] == ["pretty", "summary", "sh"]
    assert payload["paths"] == [
        {"path": os.path.realpath(scan_root / "a"), "is_preferred": False},
        {"path": os.path.realpath(scan_root / "b"), "is_preferred": True},
    ]


def test_resolve_reads_paths_from_stdin(scan_root: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "-"], input=f"{scan_root / 'a'}\n")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [entry["path"] for entry in payload["paths"]] == [os.path.realpath(scan_root / "a")]


def test_resolve_with_empty_stdin_fails(scan_root: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "-"], input="")

    assert result.exit_code == 1
    assert "No valid paths given." in result.output


def test_resolve_reports_fatal_errors(scan_root: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "-s", "10k-5k"])

    assert result.exit_code == 1
    assert "Max is smaller than min" in result.output


def test_resolve_reports_unknown_options(scan_root: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "--frobnicate"])

    assert result.exit_code == 1
    assert "Unknown option --frobnicate" in result.output


def test_resolve_rejects_output_flag_mix(scan_root: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "-o", "json", "-O", "csv"])

    assert result.exit_code == 1
    assert "Specifying both -o and -O is not allowed." in result.output


def test_options_lists_schema() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["options", "--no-color"])

    assert result.exit_code == 0
    assert "--threads" in result.output
    assert "--newer-than-stamp" in result.output


def test_version_lists_features() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.output.startswith("dupelint ")
    assert "json-cache" in result.output


def test_commands_are_listed_alphabetically() -> None:
    command = typer.main.get_command(app)

    with click.Context(command) as ctx:
        assert command.list_commands(ctx) == ["options", "resolve", "version"]


def test_feature_flags_are_coloured_on_a_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dl_logging, "detect_tty", lambda stream=None: True)

    assert Feature("xattr", True).render(color=True) == f"{ANSI['green']}+xattr{ANSI['reset']}"
    assert Feature("xattr", False).render(color=True) == f"{ANSI['red']}-xattr{ANSI['reset']}"
    assert Feature("xattr", False).render() == "-xattr"
