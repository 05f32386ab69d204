# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core CLI building blocks: option schema, tokenizer and configuration builder."""

from __future__ import annotations

from .config_builder import build_configuration, fold_arguments, initial_draft
from .options import OPTION_SCHEMA, OPTION_TABLE, OptionArity, OptionSchema, OptionSpec
from .shared import CLIError, CLILogger, build_cli_logger, register_command
from .tokenizer import OptionToken, PositionalToken, tokenize

__all__ = [
    "CLIError",
    "CLILogger",
    "OPTION_SCHEMA",
    "OPTION_TABLE",
    "OptionArity",
    "OptionSchema",
    "OptionSpec",
    "OptionToken",
    "PositionalToken",
    "build_cli_logger",
    "build_configuration",
    "fold_arguments",
    "initial_draft",
    "register_command",
    "tokenize",
]
