"""Filesystem queries used by the file facade."""

from __future__ import annotations

import os

from corefile.io.errors import os_errors
from corefile.types import StrPath


def exists(path: StrPath) -> bool:
    """Return True if ``path`` names any existing filesystem entry."""
    return os.path.exists(path)


def is_file(path: StrPath) -> bool:
    """Return True if ``path`` resolves to a regular file."""
    return os.path.isfile(path)


def is_dir(path: StrPath) -> bool:
    """Return True if ``path`` resolves to a directory."""
    return os.path.isdir(path)


def get_ctime(path: StrPath) -> float:
    """Return the creation time of ``path`` as an epoch value.

    Uses the birth time where the platform records one and falls back to
    ``st_ctime`` (inode change time on most POSIX systems).
    """
    with os_errors("stat", path):
        stat_result = os.stat(path)
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    return stat_result.st_ctime


def get_atime(path: StrPath) -> float:
    """Return the last access time of ``path`` as an epoch value."""
    with os_errors("stat", path):
        return os.stat(path).st_atime


def get_mtime(path: StrPath) -> float:
    """Return the last modification time of ``path`` as an epoch value."""
    with os_errors("stat", path):
        return os.stat(path).st_mtime


def new_line() -> str:
    """Return the platform line terminator."""
    return os.linesep
