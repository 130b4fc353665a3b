"""Tests for timestamp queries and updates."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from corefile.exceptions import NotFoundError, UnsupportedOperationError
from corefile.file import (
    get_creation_time,
    get_creation_time_utc,
    get_last_access_time,
    get_last_access_time_utc,
    get_last_write_time,
    get_last_write_time_utc,
    set_creation_time,
    set_creation_time_utc,
    set_last_access_time,
    set_last_access_time_utc,
    set_last_write_time,
    set_last_write_time_utc,
    supports_set_creation_time,
)

MOMENT = datetime(2021, 6, 15, 12, 30, 45, tzinfo=timezone.utc)


def test_utc_getters_match_stat(sample_file: Path) -> None:
    stat_result = sample_file.stat()

    assert get_last_write_time_utc(sample_file) == datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc)
    assert get_last_access_time_utc(sample_file) == datetime.fromtimestamp(stat_result.st_atime, tz=timezone.utc)
    assert get_creation_time_utc(sample_file).tzinfo is timezone.utc


def test_local_getters_are_aware_and_equal_to_utc(sample_file: Path) -> None:
    local = get_last_write_time(sample_file)

    assert local.tzinfo is not None
    assert local == get_last_write_time_utc(sample_file)
    assert get_creation_time(sample_file) == get_creation_time_utc(sample_file)
    assert get_last_access_time(sample_file) == get_last_access_time_utc(sample_file)


def test_getters_raise_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        get_last_write_time(tmp_path / "missing")


def test_set_last_write_time_utc_with_aware_datetime(sample_file: Path) -> None:
    set_last_write_time_utc(sample_file, MOMENT)

    assert get_last_write_time_utc(sample_file) == MOMENT


def test_set_last_write_time_utc_treats_naive_as_utc(sample_file: Path) -> None:
    set_last_write_time_utc(sample_file, MOMENT.replace(tzinfo=None))

    assert get_last_write_time_utc(sample_file) == MOMENT


def test_set_last_write_time_treats_naive_as_local(sample_file: Path) -> None:
    naive_local = MOMENT.astimezone().replace(tzinfo=None)

    set_last_write_time(sample_file, naive_local)

    assert get_last_write_time(sample_file) == MOMENT


def test_set_last_access_time_keeps_write_time(sample_file: Path) -> None:
    before = sample_file.stat().st_mtime_ns

    set_last_access_time(sample_file, MOMENT)

    assert get_last_access_time_utc(sample_file) == MOMENT
    assert sample_file.stat().st_mtime_ns == before


def test_set_last_write_time_keeps_access_time(sample_file: Path) -> None:
    set_last_access_time_utc(sample_file, MOMENT)

    set_last_write_time(sample_file, MOMENT + timedelta(days=1))

    assert get_last_access_time_utc(sample_file) == MOMENT
    assert get_last_write_time_utc(sample_file) == MOMENT + timedelta(days=1)


@pytest.mark.parametrize("epoch", [1_600_000_000, 1_600_000_000.5], ids=["int", "float"])
def test_setters_accept_epoch_numbers(sample_file: Path, epoch: float) -> None:
    set_last_write_time(sample_file, epoch)

    assert sample_file.stat().st_mtime == epoch


def test_setters_reject_other_types(sample_file: Path) -> None:
    with pytest.raises(TypeError, match="datetime or epoch"):
        set_last_write_time(sample_file, "2021-01-01")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        set_last_write_time(sample_file, True)


def test_setters_raise_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        set_last_access_time(tmp_path / "missing", MOMENT)
    assert not (tmp_path / "missing").exists()


def test_creation_time_setters_are_explicitly_unsupported(sample_file: Path) -> None:
    assert supports_set_creation_time() is False

    with pytest.raises(UnsupportedOperationError, match="creation time"):
        set_creation_time(sample_file, MOMENT)
    with pytest.raises(NotImplementedError):
        set_creation_time_utc(sample_file, MOMENT)


def test_creation_time_setter_reports_missing_file_first(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        set_creation_time(tmp_path / "missing", MOMENT)


def test_touching_with_os_utime_is_visible(sample_file: Path) -> None:
    os.utime(sample_file, (0, 0))

    assert get_last_write_time_utc(sample_file) == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "accessor",
    [
        get_creation_time,
        get_creation_time_utc,
        get_last_access_time,
        get_last_access_time_utc,
        get_last_write_time,
        get_last_write_time_utc,
        set_creation_time,
        set_creation_time_utc,
        set_last_access_time,
        set_last_access_time_utc,
        set_last_write_time,
        set_last_write_time_utc,
    ],
    ids=lambda accessor: accessor.__name__,
)
def test_public_time_accessors_are_documented(accessor) -> None:
    assert accessor.__doc__ and accessor.__doc__.strip()
