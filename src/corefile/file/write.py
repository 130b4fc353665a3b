"""Whole-file writers and appenders."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from corefile.config import DEFAULT_CONFIG, CoreFileConfig
from corefile.file.streams import open_file
from corefile.io.errors import os_errors
from corefile.modes import FileMode
from corefile.types import StrPath

if TYPE_CHECKING:
    from collections.abc import Buffer

logger = logging.getLogger(__name__)


def write_all_bytes(path: StrPath, data: Buffer) -> None:
    """Create or truncate ``path`` and write ``data`` to it."""
    with os_errors("write", path), open_file(path, FileMode.BINARY_READ_WRITE_TRUNCATE) as stream:
        written = stream.write(data)
    logger.debug("Wrote %d bytes to %s", written, path)


def write_all_lines(
    path: StrPath,
    lines: Iterable[str],
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> None:
    """Create or truncate ``path`` and write each line followed by the terminator."""
    _reject_bare_string(lines)
    count = 0
    with os_errors("write", path), open_file(path, FileMode.READ_WRITE_TRUNCATE, config=config) as stream:
        for line in lines:
            stream.write(line)
            stream.write(config.newline)
            count += 1
    logger.debug("Wrote %d lines to %s", count, path)


def write_all_text(
    path: StrPath,
    contents: str,
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> None:
    """Create or truncate ``path`` and write ``contents`` to it."""
    with os_errors("write", path), open_file(path, FileMode.READ_WRITE_TRUNCATE, config=config) as stream:
        stream.write(contents)
    logger.debug("Wrote %d characters to %s", len(contents), path)


def append_all_text(
    path: StrPath,
    contents: str,
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> None:
    """Append ``contents`` to ``path``, creating the file when absent."""
    with os_errors("append to", path), open_file(path, FileMode.APPEND, config=config) as stream:
        stream.write(contents)
    logger.debug("Appended %d characters to %s", len(contents), path)


def append_all_lines(
    path: StrPath,
    lines: Iterable[str],
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> None:
    """Append each line followed by the terminator, creating the file when absent."""
    _reject_bare_string(lines)
    append_all_text(path, "".join(f"{line}{config.newline}" for line in lines), config=config)


def _reject_bare_string(lines: Iterable[str]) -> None:
    if isinstance(lines, str):
        raise TypeError("lines must be an iterable of strings, not a single string")
