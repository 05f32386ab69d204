# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""dupelint CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import app
from .core.config_builder import build_configuration

__all__: Final[list[str]] = ["app", "build_configuration"]
