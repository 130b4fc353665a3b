"""Tests for size measurement."""

from __future__ import annotations

from pathlib import Path

import pytest

from corefile.exceptions import NotFoundError
from corefile.file import create, get_size, get_stream_size, open_read, write_all_bytes


@pytest.mark.parametrize("size", [0, 1, 4096, 65537], ids=["empty", "one", "page", "over_chunk"])
def test_get_size_of_path_matches_bytes_written(tmp_path: Path, size: int) -> None:
    path = tmp_path / "sized.bin"
    write_all_bytes(path, b"z" * size)

    assert get_size(path) == size
    assert get_size(str(path)) == size


def test_get_size_of_stream_restores_position(sample_file: Path) -> None:
    with open_read(sample_file) as stream:
        stream.read(3)
        before = stream.tell()

        assert get_size(stream) == 11
        assert stream.tell() == before
        assert stream.read(1) == b"o"


def test_get_stream_size_sees_unflushed_writes(tmp_path: Path) -> None:
    with create(tmp_path / "grow.bin") as stream:
        stream.write(b"abcdef")

        assert get_stream_size(stream) == 6
        assert stream.tell() == 6


def test_get_size_missing_file(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        get_size(tmp_path / "missing")

    assert get_size(tmp_path / "missing", missing_ok=True) == 0
