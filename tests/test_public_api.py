"""Tests for the top-level package surface."""

from __future__ import annotations

import logging
from pathlib import Path

import corefile


def test_all_names_resolve() -> None:
    for name in corefile.__all__:
        assert hasattr(corefile, name), name


def test_package_installs_null_handler() -> None:
    handlers = logging.getLogger("corefile").handlers

    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_facade_round_trip_through_package(tmp_path: Path) -> None:
    path = tmp_path / "foo.txt"

    corefile.write_all_text(path, "hello\nworld")

    assert corefile.exists(path)
    assert corefile.read_all_lines(path) == ["hello", "world"]
    assert corefile.get_size(path) == len(b"hello\nworld")
