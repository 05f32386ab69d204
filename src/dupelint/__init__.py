# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core package metadata and the configuration entry point."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("dupelint")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

from .cli.core.config_builder import build_configuration  # noqa: E402
from .config.models import Configuration  # noqa: E402

__all__ = ["Configuration", "__version__", "build_configuration"]
