"""Atomic persistence through a temporary sibling file."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path


def write_bytes_atomic(
    *,
    path: Path,
    payload: bytes,
    temp_prefix: str,
    temp_suffix: str,
    permissions: int | None = None,
) -> None:
    """Persist bytes atomically by writing to a temp sibling then renaming.

    ``permissions`` is applied to the temp file before the rename; without it
    the result keeps the restrictive mode ``tempfile`` creates files with.
    """
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        if permissions is not None:
            os.chmod(temp_name, permissions)
        os.replace(temp_name, path)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
