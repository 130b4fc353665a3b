"""Low-level open flags for each file access mode."""

from __future__ import annotations

import os

# Zero on POSIX; Windows needs it to disable CRLF translation at the fd level.
O_BINARY: int = getattr(os, "O_BINARY", 0)

# Keyed by the text-mode access token.
ACCESS_OS_FLAGS: dict[str, int] = {
    "r": os.O_RDONLY,
    "w": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "r+": os.O_RDWR,
    "w+": os.O_RDWR | os.O_CREAT | os.O_TRUNC,
    "a": os.O_RDWR | os.O_APPEND | os.O_CREAT,
    "a+": os.O_RDWR | os.O_APPEND | os.O_CREAT | os.O_TRUNC,
}

BINARY_SUFFIX: str = "b"

# Permission bits for newly created files, before the process umask applies.
NEW_FILE_PERMISSIONS: int = 0o666

# Stream mode for both append accesses; their descriptors are always readable.
READ_APPEND_MODE: str = "a+"
