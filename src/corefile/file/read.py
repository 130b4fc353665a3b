"""Whole-file readers."""

from __future__ import annotations

from corefile.config import DEFAULT_CONFIG, CoreFileConfig
from corefile.file.common import require_file
from corefile.file.streams import open_read, open_text
from corefile.file.size import get_stream_size
from corefile.io.errors import os_errors
from corefile.types import StrPath


def read_all_bytes(path: StrPath, *, missing_ok: bool = False) -> bytes:
    """Return the full contents of ``path``.

    A missing file raises ``NotFoundError``; with ``missing_ok`` it reads as
    ``b""`` instead.
    """
    if not require_file(path, "read", missing_ok=missing_ok):
        return b""
    with os_errors("read", path), open_read(path) as stream:
        size = get_stream_size(stream)
        return stream.read(size)


def read_all_lines(
    path: StrPath,
    *,
    missing_ok: bool = False,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Return the lines of ``path`` without their terminators.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line. A terminator at the end of
    the file does not start an extra empty line, so ``"a\\nb"`` and
    ``"a\\nb\\n"`` both read as ``["a", "b"]``.
    """
    if not require_file(path, "read", missing_ok=missing_ok):
        return []
    lines: list[str] = []
    with os_errors("read", path), open_text(path, config=config) as stream:
        for line in iter(stream.readline, ""):
            lines.append(_strip_terminator(line))
    return lines


def read_all_text(
    path: StrPath,
    *,
    missing_ok: bool = False,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> str:
    """Return the contents of ``path`` decoded with the configured codec."""
    return read_all_bytes(path, missing_ok=missing_ok).decode(config.encoding, config.errors)


def _strip_terminator(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")
