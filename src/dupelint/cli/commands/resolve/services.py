# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers backing the ``resolve`` command."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TextIO

from ....config.errors import ConfigError
from ....config.models import Configuration
from ...core.config_builder import build_configuration
from ...core.shared import CLIError, CLILogger


def resolve_configuration(
    tokens: Sequence[str],
    *,
    logger: CLILogger,
    stdin: TextIO | None = None,
) -> Configuration:
    """Resolve ``tokens`` and translate configuration failures into CLI errors.

    Args:
        tokens: Raw option and path tokens.
        logger: CLI logger receiving warnings and the failure message.
        stdin: Optional stream used when a ``-`` token is present.

    Returns:
        Configuration: Validated configuration.

    Raises:
        CLIError: If resolution fails; the message has already been logged.
    """

    try:
        return build_configuration(tokens, stdin=stdin, logger=logger)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def render_configuration(config: Configuration) -> str:
    """Return ``config`` serialised as indented JSON."""

    return json.dumps(config.model_dump(mode="json"), indent=2, sort_keys=True)


__all__ = ["render_configuration", "resolve_configuration"]
