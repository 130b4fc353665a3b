"""Shared pytest fixtures for file-operation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from corefile.config import CoreFileConfig


@pytest.fixture()
def lf_config() -> CoreFileConfig:
    """Config with a fixed ``\\n`` terminator so assertions are platform independent."""
    return CoreFileConfig(newline="\n")


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    """Return a small existing binary file."""
    path = tmp_path / "sample.bin"
    path.write_bytes(b"\x00\x01corefile\xff")
    return path
