# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the option schema listing."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.table import Table

from ...core.options import OptionSpec


def build_options_table(options: Iterable[OptionSpec]) -> Table:
    """Return a Rich table describing every option record.

    Args:
        options: Schema records in declaration order.

    Returns:
        Table: Table with name, value placeholder and description columns.
    """

    table = Table(title="Scanner options", box=box.SIMPLE)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")
    table.add_column("Description")
    for spec in options:
        table.add_row(spec.display_names, spec.metavar or "", spec.help)
    return table


__all__ = ["build_options_table"]
