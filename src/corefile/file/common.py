"""Precondition checks shared by the facade operations."""

from __future__ import annotations

import errno

from corefile import fs
from corefile.exceptions import IoFailureError, NotFoundError
from corefile.io.errors import os_error
from corefile.types import StrPath


def require_file(path: StrPath, action: str, *, missing_ok: bool = False) -> bool:
    """Check that ``path`` is a regular file before ``action`` touches it.

    Returns False when the path is absent and ``missing_ok`` is set, so the
    caller can fall back to an empty result.
    """
    if fs.is_file(path):
        return True
    if fs.exists(path):
        raise os_error(
            IoFailureError,
            f"Failed to {action} {path}: not a regular file",
            code=errno.EISDIR if fs.is_dir(path) else None,
            path=path,
            strerror="not a regular file",
        )
    if missing_ok:
        return False
    raise os_error(
        NotFoundError,
        f"Failed to {action} {path}: file not found",
        code=errno.ENOENT,
        path=path,
        strerror="file not found",
    )
