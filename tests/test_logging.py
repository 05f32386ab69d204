# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the message helpers and the CLI logger facade."""

from __future__ import annotations

import sys

import pytest

from dupelint import logging as dl_logging
from dupelint.cli.core.shared import build_cli_logger, highlight_pairs


def test_colorize_requires_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dl_logging, "detect_tty", lambda stream=None: False)
    assert dl_logging.colorize("text", "red", True) == "text"

    monkeypatch.setattr(dl_logging, "detect_tty", lambda stream=None: True)
    assert dl_logging.colorize("text", "red", True) == "\033[31;1mtext\033[0m"
    assert dl_logging.colorize("text", "red", False) == "text"


def test_emoji_toggle() -> None:
    assert dl_logging.emoji("✅ ", True) == "✅ "
    assert dl_logging.emoji("✅ ", False) == ""


def test_streams_are_split(capsys: pytest.CaptureFixture[str]) -> None:
    dl_logging.info("scanning", use_emoji=False)
    dl_logging.warn("careful", use_emoji=False)
    dl_logging.fail("broken", use_emoji=True, use_color=False)

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["scanning"]
    assert "careful" in captured.err
    assert "❌ broken" in captured.err


def test_cli_logger_debug_is_opt_in(capsys: pytest.CaptureFixture[str]) -> None:
    build_cli_logger(emoji=False).debug("option=--loud")
    assert capsys.readouterr().err == ""

    build_cli_logger(emoji=False, debug=True, no_color=True).debug("option=--threads value='4'")
    assert "[debug] option=--threads value='4'" in capsys.readouterr().err


def test_highlight_pairs_keeps_text() -> None:
    text = highlight_pairs("folding option=--types value='defaults,-ef' now")
    assert text.plain == "[debug] folding option=--types value='defaults,-ef' now"


def test_colour_follows_the_stream_being_written(monkeypatch: pytest.MonkeyPatch) -> None:
    probed: list[object] = []

    def fake_detect_tty(stream=None) -> bool:
        probed.append(stream)
        return False

    monkeypatch.setattr(dl_logging, "detect_tty", fake_detect_tty)
    dl_logging.warn("careful", use_emoji=False)
    dl_logging.info("scanning", use_emoji=False)

    assert probed == [sys.stderr, sys.stdout]
