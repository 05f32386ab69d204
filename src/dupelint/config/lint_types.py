# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Signed set-algebra over lint categories for the ``--types`` option.

A ``--types`` value is a separator-delimited stream of tokens such as
``defaults,-ef`` or ``+dd``. Tokens are folded into an explicit selection of
categories to enable and disable, which is then applied to the draft in a
single step:

* ``+name`` enables the bundle behind ``name``;
* ``-name`` disables it;
* an unsigned first token resets every category before enabling its bundle.

Unsigned tokens after the first one and unknown names are skipped with a
notice. The separator is the first non-alphabetic character following the
optional sign and leading name of the stream, defaulting to ``,``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .models import ConfigDraft, LintCategory

DEFAULT_SEPARATOR: Final[str] = ","
ENABLE_PREFIX: Final[str] = "+"
DISABLE_PREFIX: Final[str] = "-"


@dataclass(frozen=True, slots=True)
class LintTypeOption:
    """Catalog entry mapping name aliases onto a bundle of categories."""

    names: tuple[str, ...]
    categories: frozenset[LintCategory]

    def matches(self, name: str) -> bool:
        """Return ``True`` when ``name`` is one of this entry's aliases."""

        return name in self.names


ALL_CATEGORIES: Final[frozenset[LintCategory]] = frozenset(LintCategory)

LINT_TYPE_CATALOG: Final[tuple[LintTypeOption, ...]] = (
    LintTypeOption(("all",), ALL_CATEGORIES),
    LintTypeOption(
        ("minimal",),
        frozenset({LintCategory.BAD_IDS, LintCategory.BAD_LINKS, LintCategory.DUPLICATES}),
    ),
    LintTypeOption(
        ("minimaldirs",),
        frozenset({LintCategory.BAD_IDS, LintCategory.BAD_LINKS, LintCategory.DUPLICATE_DIRS}),
    ),
    LintTypeOption(
        ("defaults",),
        frozenset(
            {
                LintCategory.BAD_IDS,
                LintCategory.BAD_LINKS,
                LintCategory.EMPTY_DIRS,
                LintCategory.EMPTY_FILES,
                LintCategory.DUPLICATES,
            },
        ),
    ),
    LintTypeOption(("none",), frozenset()),
    LintTypeOption(("badids", "bi"), frozenset({LintCategory.BAD_IDS})),
    LintTypeOption(("badlinks", "bl"), frozenset({LintCategory.BAD_LINKS})),
    LintTypeOption(("emptydirs", "ed"), frozenset({LintCategory.EMPTY_DIRS})),
    LintTypeOption(("emptyfiles", "ef"), frozenset({LintCategory.EMPTY_FILES})),
    LintTypeOption(("nonstripped", "ns"), frozenset({LintCategory.NON_STRIPPED})),
    LintTypeOption(("duplicates", "df", "dupes"), frozenset({LintCategory.DUPLICATES})),
    LintTypeOption(("duplicatedirs", "dd", "dupedirs"), frozenset({LintCategory.DUPLICATE_DIRS})),
)


@dataclass(frozen=True, slots=True)
class LintTypeSelection:
    """Result of folding a ``--types`` token stream.

    Attributes:
        reset: ``True`` when every category is cleared before applying ``enable``.
        enable: Categories switched on.
        disable: Categories switched off.
        notices: Warnings raised for skipped tokens.
    """

    reset: bool = False
    enable: frozenset[LintCategory] = frozenset()
    disable: frozenset[LintCategory] = frozenset()
    notices: tuple[str, ...] = field(default=())

    def with_enabled(self, categories: frozenset[LintCategory]) -> LintTypeSelection:
        """Return a selection where ``categories`` end up enabled."""

        return LintTypeSelection(self.reset, self.enable | categories, self.disable - categories, self.notices)

    def with_disabled(self, categories: frozenset[LintCategory]) -> LintTypeSelection:
        """Return a selection where ``categories`` end up disabled."""

        return LintTypeSelection(self.reset, self.enable - categories, self.disable | categories, self.notices)

    def with_notice(self, message: str) -> LintTypeSelection:
        """Return a selection carrying an additional notice."""

        return LintTypeSelection(self.reset, self.enable, self.disable, (*self.notices, message))


def find_separator(spec: str) -> str:
    """Return the separator used by the ``--types`` value ``spec``.

    Args:
        spec: Raw token stream.

    Returns:
        str: First non-alphabetic character after the optional sign and the
        leading name, or ``","`` when the stream is a single name.
    """

    index = 1 if spec[:1] in (ENABLE_PREFIX, DISABLE_PREFIX) else 0
    while index < len(spec) and spec[index].isalpha():
        index += 1
    return spec[index] if index < len(spec) else DEFAULT_SEPARATOR


def lookup_lint_type(
    name: str,
    catalog: tuple[LintTypeOption, ...] = LINT_TYPE_CATALOG,
) -> LintTypeOption | None:
    """Return the catalog entry whose aliases contain ``name`` (case-sensitive)."""

    return next((option for option in catalog if option.matches(name)), None)


def fold_lint_types(
    spec: str,
    catalog: tuple[LintTypeOption, ...] = LINT_TYPE_CATALOG,
) -> LintTypeSelection:
    """Fold the ``--types`` token stream ``spec`` into a selection.

    Args:
        spec: Raw token stream such as ``"defaults,-ef"``.
        catalog: Lint type catalog used to resolve names.

    Returns:
        LintTypeSelection: Categories to enable and disable, plus notices.
    """

    selection = LintTypeSelection()
    for index, token in enumerate(spec.split(find_separator(spec))):
        if not token:
            continue
        sign = token[:1] if token[:1] in (ENABLE_PREFIX, DISABLE_PREFIX) else ""
        if not sign and index > 0:
            selection = selection.with_notice(
                "lint types after first should be prefixed with '+' or '-' "
                f"or they would over-ride previously set options: [{token}]",
            )
            continue

        name = token[len(sign) :]
        option = lookup_lint_type(name, catalog)
        if option is None:
            selection = selection.with_notice(f"lint type '{name}' not recognised")
            continue

        if not sign:
            selection = LintTypeSelection(reset=True, notices=selection.notices)
        if sign == DISABLE_PREFIX:
            selection = selection.with_disabled(option.categories)
        else:
            selection = selection.with_enabled(option.categories)
    return selection


def apply_lint_selection(draft: ConfigDraft, selection: LintTypeSelection) -> ConfigDraft:
    """Return ``draft`` with the lint category flags set from ``selection``.

    Enabling duplicate directories also includes hidden files and reports
    hardlinks as duplicates, since directory comparison needs both.

    Args:
        draft: Configuration draft being built.
        selection: Folded ``--types`` selection.

    Returns:
        ConfigDraft: Updated draft carrying any notices from ``selection``.
    """

    updates: dict[str, object] = {}
    if selection.reset:
        updates.update({category.field_name: False for category in ALL_CATEGORIES})
    updates.update({category.field_name: True for category in selection.enable})
    updates.update({category.field_name: False for category in selection.disable})

    draft = draft.evolve(**updates)
    if draft.merge_directories:
        draft = draft.evolve(ignore_hidden=False, find_hardlinked_dupes=True)
    for notice in selection.notices:
        draft = draft.with_notice(notice)
    return draft


def apply_lint_types(
    draft: ConfigDraft,
    spec: str,
    catalog: tuple[LintTypeOption, ...] = LINT_TYPE_CATALOG,
) -> ConfigDraft:
    """Resolve the ``--types`` value ``spec`` onto ``draft``."""

    return apply_lint_selection(draft, fold_lint_types(spec, catalog))


__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_SEPARATOR",
    "LINT_TYPE_CATALOG",
    "LintTypeOption",
    "LintTypeSelection",
    "apply_lint_selection",
    "apply_lint_types",
    "find_separator",
    "fold_lint_types",
    "lookup_lint_type",
]
