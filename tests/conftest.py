# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from dupelint.config.models import ConfigDraft

# 2023-11-14T22:13:20Z
FIXED_EPOCH = 1_700_000_000
FIXED_NOW = float(FIXED_EPOCH + 86_400)


@pytest.fixture
def fixed_now() -> float:
    """Return a reference time one day after :data:`FIXED_EPOCH`."""
    return FIXED_NOW


@pytest.fixture
def draft(tmp_path: Path) -> ConfigDraft:
    """Return a fresh draft rooted in a temporary working directory."""
    return ConfigDraft(working_directory=f"{tmp_path}/", reference_time=FIXED_NOW)


@pytest.fixture
def scan_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a scan directory, make it the working directory and return it."""
    root = tmp_path / "scan"
    root.mkdir()
    (root / "a").mkdir()
    (root / "b").mkdir()
    monkeypatch.chdir(root)
    return root
