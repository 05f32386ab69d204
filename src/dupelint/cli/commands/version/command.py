# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command reporting the package version and runtime capabilities."""

from __future__ import annotations

import hashlib
import os
import sys
from dataclasses import dataclass

from ....logging import colorize, info
from ...core.shared import build_cli_logger


@dataclass(frozen=True, slots=True)
class Feature:
    """Named runtime capability and whether it is available."""

    name: str
    enabled: bool

    def render(self, *, color: bool = False) -> str:
        """Return the feature as ``+name`` or ``-name``, green or red when ``color`` is set."""

        if self.enabled:
            return colorize(f"+{self.name}", "green", color)
        return colorize(f"-{self.name}", "red", color)


def detect_features() -> tuple[Feature, ...]:
    """Probe the interpreter for the capabilities the scanner relies on."""

    return (
        Feature("xattr", hasattr(os, "getxattr")),
        Feature("sha512", "sha512" in hashlib.algorithms_available),
        Feature("bigfiles", sys.maxsize > 2**32),
        Feature("json-cache", True),
    )


def version_command() -> None:
    """Print the version and the compiled-in feature list."""

    from .... import __version__

    logger = build_cli_logger(emoji=False)
    info(f"dupelint {__version__}", use_emoji=False)
    logger.echo("features: " + " ".join(feature.render(color=True) for feature in detect_features()))


__all__ = ["Feature", "detect_features", "version_command"]
