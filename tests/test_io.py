"""Tests for atomic writes and OSError translation."""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from corefile.exceptions import (
    AlreadyExistsError,
    CoreFileError,
    IoFailureError,
    NotFoundError,
    PermissionDeniedError,
)
from corefile.io import os_errors, translate_os_error, write_bytes_atomic


def test_write_bytes_atomic_replaces_target(tmp_path: Path) -> None:
    out_path = tmp_path / "out.bin"
    out_path.write_bytes(b"old")

    write_bytes_atomic(path=out_path, payload=b"new", temp_prefix=".tmp-", temp_suffix=".bin")

    assert out_path.read_bytes() == b"new"
    assert [item.name for item in tmp_path.iterdir()] == ["out.bin"]


def test_write_bytes_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "out.bin"
    temp_prefix = ".tmp-"
    temp_suffix = ".bin"

    with pytest.raises(TypeError):
        write_bytes_atomic(
            path=out_path,
            payload="not bytes",  # type: ignore[arg-type]
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_bytes_atomic_applies_permissions(tmp_path: Path) -> None:
    out_path = tmp_path / "perm.bin"

    write_bytes_atomic(path=out_path, payload=b"x", temp_prefix=".t-", temp_suffix="", permissions=0o644)

    assert out_path.stat().st_mode & 0o777 == 0o644


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (FileNotFoundError(errno.ENOENT, "No such file or directory"), NotFoundError),
        (PermissionError(errno.EACCES, "Permission denied"), PermissionDeniedError),
        (OSError(errno.EPERM, "Operation not permitted"), PermissionDeniedError),
        (FileExistsError(errno.EEXIST, "File exists"), AlreadyExistsError),
        (IsADirectoryError(errno.EISDIR, "Is a directory"), IoFailureError),
        (OSError(errno.ENOSPC, "No space left on device"), IoFailureError),
    ],
    ids=["enoent", "eacces", "eperm", "eexist", "eisdir", "enospc"],
)
def test_translate_os_error(exc: OSError, expected: type[CoreFileError]) -> None:
    translated = translate_os_error(exc, "read", "/tmp/f")

    assert type(translated) is expected
    assert str(translated) == f"Failed to read /tmp/f: {exc.strerror}"
    assert translated.errno == exc.errno
    assert translated.strerror == exc.strerror
    assert translated.filename == "/tmp/f"


def test_os_errors_chains_original_exception() -> None:
    original = OSError(errno.EIO, "Input/output error")

    with pytest.raises(IoFailureError) as excinfo:
        with os_errors("write", "data.bin"):
            raise original

    assert excinfo.value.__cause__ is original


def test_os_errors_passes_typed_errors_through() -> None:
    error = NotFoundError("already typed")

    with pytest.raises(NotFoundError) as excinfo:
        with os_errors("write", "data.bin"):
            raise error

    assert excinfo.value is error
