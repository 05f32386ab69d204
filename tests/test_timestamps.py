# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for timestamp specifiers and stamp files."""

from __future__ import annotations

from pathlib import Path

import pytest

from dupelint.config.errors import TimestampError, TimestampErrorReason
from dupelint.config.models import ConfigDraft, OutputSinkRegistration, SinkConfigOverride
from dupelint.config.timestamps import (
    apply_timestamp,
    apply_timestamp_file,
    format_iso8601,
    parse_iso8601,
    resolve_timestamp,
)

EPOCH = 1_700_000_000


def test_plain_epoch_resolves_exactly(fixed_now: float) -> None:
    resolved = resolve_timestamp(str(EPOCH), now=fixed_now)
    assert resolved.instant == EPOCH
    assert resolved.plain
    assert not resolved.in_future


def test_iso8601_resolves_to_same_instant(fixed_now: float) -> None:
    resolved = resolve_timestamp("2023-11-14T22:13:20Z", now=fixed_now)
    assert resolved.instant == EPOCH
    assert not resolved.plain


def test_iso8601_with_fraction_and_offset() -> None:
    assert parse_iso8601("2023-11-14T22:13:20.250Z") == EPOCH
    assert parse_iso8601("2023-11-15T00:13:20+02:00") == EPOCH


@pytest.mark.parametrize("spec", ["0", "yesterday", "2023-13-45T99:00:00Z", "-5"])
def test_unparsable_timestamps_are_rejected(spec: str, fixed_now: float) -> None:
    with pytest.raises(TimestampError) as excinfo:
        resolve_timestamp(spec, now=fixed_now)
    assert excinfo.value.reason is TimestampErrorReason.UNPARSABLE_TIMESTAMP


def test_apply_timestamp_enables_time_filter(draft: ConfigDraft) -> None:
    updated = apply_timestamp(draft, str(EPOCH), now=draft.reference_time)
    assert updated.time_filter.enabled
    assert updated.time_filter.min_mtime == EPOCH
    assert updated.notices == ()
    assert not draft.time_filter.enabled


def test_future_timestamp_is_accepted_with_notice(draft: ConfigDraft) -> None:
    updated = apply_timestamp(draft, str(EPOCH + 10 * 86_400), now=draft.reference_time)
    assert updated.time_filter.enabled
    assert len(updated.notices) == 1
    assert updated.notices[0].startswith(f"--newer-than {EPOCH + 10 * 86_400} is newer than current time")


def test_future_stamp_notice_names_the_stamp_option(tmp_path: Path, draft: ConfigDraft) -> None:
    stamp = tmp_path / "stamp"
    stamp.write_text(f"{EPOCH + 10 * 86_400}\n", encoding="utf-8")

    updated = apply_timestamp_file(draft, str(stamp), now=draft.reference_time)

    assert updated.notices[0].startswith("--newer-than-stamp ")


def test_stamp_file_with_plain_epoch(tmp_path: Path, draft: ConfigDraft) -> None:
    stamp = tmp_path / "stamp"
    stamp.write_text(f"  {EPOCH}\nignored second line\n", encoding="utf-8")

    updated = apply_timestamp_file(draft, str(stamp), now=draft.reference_time)

    assert updated.time_filter.min_mtime == EPOCH
    assert updated.outputs == (OutputSinkRegistration(formatter="stamp", target=str(stamp)),)
    assert updated.output_config == ()


def test_stamp_file_with_iso8601_requests_iso_rewrite(tmp_path: Path, draft: ConfigDraft) -> None:
    stamp = tmp_path / "stamp"
    stamp.write_text("2023-11-14T22:13:20Z\n", encoding="utf-8")

    updated = apply_timestamp_file(draft, str(stamp), now=draft.reference_time)

    assert updated.time_filter.min_mtime == EPOCH
    assert updated.output_config == (SinkConfigOverride(formatter="stamp", key="iso8601", value="true"),)


def test_missing_stamp_file_only_warns(tmp_path: Path, draft: ConfigDraft) -> None:
    updated = apply_timestamp_file(draft, str(tmp_path / "missing"), now=draft.reference_time)

    assert not updated.time_filter.enabled
    assert updated.outputs == ()
    assert len(updated.notices) == 1
    assert "Cannot read stamp file" in updated.notices[0]


def test_stamp_file_with_garbage_is_fatal(tmp_path: Path, draft: ConfigDraft) -> None:
    stamp = tmp_path / "stamp"
    stamp.write_text("not a time\n", encoding="utf-8")

    with pytest.raises(TimestampError) as excinfo:
        apply_timestamp_file(draft, str(stamp), now=draft.reference_time)
    assert excinfo.value.reason is TimestampErrorReason.UNPARSABLE_TIMESTAMP


def test_format_iso8601_renders_utc() -> None:
    assert format_iso8601(EPOCH) == "2023-11-14T22:13:20.000Z"
