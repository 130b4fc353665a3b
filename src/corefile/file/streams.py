"""Opening and creating file streams."""

from __future__ import annotations

import os

from corefile.config import DEFAULT_CONFIG, CoreFileConfig
from corefile.constants.modes import NEW_FILE_PERMISSIONS
from corefile.io.errors import os_errors
from corefile.modes import FileMode, parse_mode
from corefile.types import FileStream, StrPath


def open_file(
    path: StrPath,
    mode: FileMode | str = FileMode.BINARY_READ,
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> FileStream:
    """Open ``path`` with ``mode`` and return the stream.

    The descriptor is opened with the flags of ``mode`` directly. Text streams
    use the configured codec and perform no newline translation. The caller
    owns the returned stream and should use it as a context manager.
    """
    file_mode = parse_mode(mode)
    flags = file_mode.os_flags

    def _opener(name: str, _flags: int) -> int:
        return os.open(name, flags, NEW_FILE_PERMISSIONS)

    with os_errors("open", path):
        if file_mode.binary:
            return open(path, file_mode.stream_mode, opener=_opener)
        return open(
            path,
            file_mode.stream_mode,
            encoding=config.encoding,
            errors=config.errors,
            newline="",
            opener=_opener,
        )


def open_read(path: StrPath) -> FileStream:
    """Open an existing file for binary reading."""
    return open_file(path, FileMode.BINARY_READ)


def open_text(path: StrPath, *, config: CoreFileConfig = DEFAULT_CONFIG) -> FileStream:
    """Open an existing file for text reading."""
    return open_file(path, FileMode.READ, config=config)


def open_write(path: StrPath) -> FileStream:
    """Open an existing file, or create a new one, for binary writing."""
    return open_file(path, FileMode.BINARY_WRITE)


def create(path: StrPath) -> FileStream:
    """Create or truncate ``path`` and return a binary read/write stream."""
    return open_file(path, FileMode.BINARY_READ_WRITE_TRUNCATE)


def create_text(path: StrPath, *, config: CoreFileConfig = DEFAULT_CONFIG) -> FileStream:
    """Create or truncate ``path`` and return a text read/write stream."""
    return open_file(path, FileMode.READ_WRITE_TRUNCATE, config=config)
