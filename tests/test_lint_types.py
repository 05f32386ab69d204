# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the ``--types`` set-algebra."""

from __future__ import annotations

from dupelint.config.lint_types import (
    LINT_TYPE_CATALOG,
    LintTypeSelection,
    apply_lint_types,
    find_separator,
    fold_lint_types,
    lookup_lint_type,
)
from dupelint.config.models import ConfigDraft, LintCategory

LINT_FIELDS = [category.field_name for category in LintCategory]


def _enabled(draft: ConfigDraft) -> set[str]:
    return {name for name in LINT_FIELDS if getattr(draft, name)}


def test_separator_detection() -> None:
    assert find_separator("defaults,-ef") == ","
    assert find_separator("+bi;-bl") == ";"
    assert find_separator("minimal") == ","
    assert find_separator("-dd") == ","


def test_catalog_aliases_are_case_sensitive() -> None:
    option = lookup_lint_type("dupes", LINT_TYPE_CATALOG)
    assert option is not None
    assert option.categories == frozenset({LintCategory.DUPLICATES})
    assert lookup_lint_type("DUPES", LINT_TYPE_CATALOG) is None


def test_defaults_minus_empty_files(draft: ConfigDraft) -> None:
    updated = apply_lint_types(draft.evolve(find_nonstripped=True), "defaults,-ef")

    assert _enabled(updated) == {
        "find_bad_ids",
        "find_bad_links",
        "find_empty_dirs",
        "search_duplicates",
    }
    assert updated.notices == ()


def test_signed_token_keeps_prior_flags(draft: ConfigDraft) -> None:
    updated = apply_lint_types(draft, "+dd")

    assert updated.merge_directories
    assert updated.ignore_hidden is False
    assert updated.find_hardlinked_dupes is True
    assert _enabled(updated) == _enabled(draft) | {"merge_directories"}


def test_unsigned_first_token_resets_everything(draft: ConfigDraft) -> None:
    updated = apply_lint_types(draft, "bi")
    assert _enabled(updated) == {"find_bad_ids"}


def test_none_preset_clears_every_flag(draft: ConfigDraft) -> None:
    assert _enabled(apply_lint_types(draft, "none")) == set()


def test_unsigned_later_token_is_skipped_with_notice(draft: ConfigDraft) -> None:
    updated = apply_lint_types(draft, "minimal,ef")

    assert _enabled(updated) == {"find_bad_ids", "find_bad_links", "search_duplicates"}
    assert len(updated.notices) == 1
    assert "[ef]" in updated.notices[0]


def test_unknown_name_is_skipped_with_notice(draft: ConfigDraft) -> None:
    updated = apply_lint_types(draft, "+bogus,-ef")

    assert updated.list_empty_files is False
    assert updated.find_bad_ids is True
    assert updated.notices == ("lint type 'bogus' not recognised",)


def test_unknown_first_token_does_not_reset(draft: ConfigDraft) -> None:
    updated = apply_lint_types(draft, "bogus")
    assert _enabled(updated) == _enabled(draft)


def test_empty_stream_changes_nothing(draft: ConfigDraft) -> None:
    assert fold_lint_types("") == LintTypeSelection()

    updated = apply_lint_types(draft, "")
    assert updated.notices == ()
    assert _enabled(updated) == _enabled(draft)


def test_fold_records_enable_and_disable_sets() -> None:
    selection = fold_lint_types("all,-dd,-ns")

    assert selection.reset
    assert LintCategory.DUPLICATE_DIRS in selection.disable
    assert LintCategory.NON_STRIPPED in selection.disable
    assert LintCategory.DUPLICATE_DIRS not in selection.enable


def test_later_token_wins_within_a_stream() -> None:
    selection = fold_lint_types("+ef,-ef,+ef")
    assert LintCategory.EMPTY_FILES in selection.enable
    assert LintCategory.EMPTY_FILES not in selection.disable


def test_resolving_twice_is_idempotent(draft: ConfigDraft) -> None:
    once = apply_lint_types(draft, "defaults,-ef,+dd")
    twice = apply_lint_types(once, "defaults,-ef,+dd")
    assert twice == once
