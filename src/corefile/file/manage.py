"""Copy, move, delete and existence checks."""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path

from corefile import fs
from corefile.config import DEFAULT_CONFIG, CoreFileConfig
from corefile.exceptions import AlreadyExistsError
from corefile.file.common import require_file
from corefile.file.read import read_all_bytes
from corefile.file.write import write_all_bytes
from corefile.io.atomic import write_bytes_atomic
from corefile.io.errors import os_error, os_errors, translate_os_error
from corefile.types import StrPath

logger = logging.getLogger(__name__)


def exists(path: StrPath) -> bool:
    """Return True if ``path`` resolves to a regular file."""
    return fs.is_file(path)


def copy(
    src: StrPath,
    dst: StrPath,
    overwrite: bool = False,
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> None:
    """Copy the contents of ``src`` to ``dst``.

    Raises ``AlreadyExistsError`` and leaves ``dst`` untouched when it exists
    and ``overwrite`` is false. With ``config.atomic_copy`` the bytes land in
    a temporary sibling of ``dst`` that is renamed over it, so ``dst`` is
    never observed half written.
    """
    require_file(src, "copy")
    _refuse_existing(dst, overwrite)

    payload = read_all_bytes(src)
    if config.atomic_copy:
        with os_errors("copy to", dst):
            write_bytes_atomic(
                path=Path(dst),
                payload=payload,
                temp_prefix=config.temp_prefix,
                temp_suffix=config.temp_suffix,
                permissions=stat.S_IMODE(os.stat(src).st_mode),
            )
    else:
        write_all_bytes(dst, payload)
    logger.debug("Copied %s to %s (%d bytes)", src, dst, len(payload))


def move(
    src: StrPath,
    dst: StrPath,
    overwrite: bool = False,
    *,
    config: CoreFileConfig = DEFAULT_CONFIG,
) -> None:
    """Move ``src`` to ``dst``, falling back to copy and delete across devices."""
    require_file(src, "move")
    _refuse_existing(dst, overwrite)

    try:
        os.replace(src, dst)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise translate_os_error(exc, "move", src) from exc
        logger.debug("Cross-device move of %s, copying instead", src)
        copy(src, dst, overwrite=True, config=config)
        delete(src)
    logger.debug("Moved %s to %s", src, dst)


def delete(path: StrPath, *, missing_ok: bool = False) -> None:
    """Remove the file at ``path``.

    A missing path raises ``NotFoundError`` unless ``missing_ok`` is set, in
    which case the call does nothing.
    """
    try:
        os.remove(path)
    except FileNotFoundError as exc:
        if not missing_ok:
            raise translate_os_error(exc, "delete", path) from exc
        logger.debug("Nothing to delete at %s", path)
        return
    except OSError as exc:
        raise translate_os_error(exc, "delete", path) from exc
    logger.debug("Deleted %s", path)


def _refuse_existing(dst: StrPath, overwrite: bool) -> None:
    if not overwrite and fs.exists(dst):
        raise os_error(
            AlreadyExistsError,
            f"Destination exists and overwrite is false: {dst}",
            code=errno.EEXIST,
            path=dst,
            strerror="destination exists",
        )
