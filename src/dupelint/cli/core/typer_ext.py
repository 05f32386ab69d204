# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer application factory producing alphabetically sorted help output."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import typer
from click.core import Context, Option, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Settings forwarded to :class:`typer.Typer` by :func:`create_typer`."""

    name: str | None = None
    help_text: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = False
    add_completion: bool = False


def _sort_key(param: Parameter) -> str:
    """Return the long option name of ``param`` without dashes, lower-cased."""

    names = [*param.opts, *param.secondary_opts]
    long_names = [name for name in names if name.startswith("--")]
    chosen = long_names[0] if long_names else (names[0] if names else param.name or "")
    return chosen.lstrip("-").lower()


class SortedTyperCommand(TyperCommand):
    """Command whose ``--help`` lists arguments first, then options by name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        params = self.get_params(ctx)
        arguments = [param for param in params if not isinstance(param, Option)]
        options = sorted((param for param in params if isinstance(param, Option)), key=_sort_key)
        for title, group in (("Arguments", arguments), ("Options", options)):
            records = [record for record in (param.get_help_record(ctx) for param in group) if record]
            if records:
                with formatter.section(title):
                    formatter.write_dl(records)


class SortedTyperGroup(TyperGroup):
    """Group listing its commands alphabetically."""

    command_class = SortedTyperCommand

    def list_commands(self, ctx: Context) -> list[str]:
        return sorted(super().list_commands(ctx))


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application whose commands default to :class:`SortedTyperCommand`."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return the registration decorator with the sorted command class."""

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, config: TyperAppConfig | None = None) -> SortedTyper:
    """Return a :class:`SortedTyper` built from ``config``.

    Args:
        config: Application settings; defaults apply when ``None``.

    Returns:
        SortedTyper: Application ready for command registration.
    """

    settings = config or TyperAppConfig()
    return SortedTyper(
        name=settings.name,
        help=settings.help_text,
        invoke_without_command=settings.invoke_without_command,
        no_args_is_help=settings.no_args_is_help,
        add_completion=settings.add_completion,
    )


__all__ = [
    "SortedTyper",
    "SortedTyperCommand",
    "SortedTyperGroup",
    "TyperAppConfig",
    "create_typer",
]
