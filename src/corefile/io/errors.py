"""Translation of ``OSError`` into the corefile error taxonomy."""

from __future__ import annotations

import errno
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from corefile.exceptions import (
    AlreadyExistsError,
    CoreFileError,
    IoFailureError,
    NotFoundError,
    PermissionDeniedError,
)

E = TypeVar("E", bound=OSError)


def os_error(
    error_type: type[E],
    message: str,
    *,
    code: int | None,
    path: object,
    strerror: str | None = None,
) -> E:
    """Build an ``OSError`` subclass that carries ``errno`` and ``filename``."""
    error = error_type(message)
    error.errno = code
    error.strerror = strerror
    error.filename = path
    return error


def translate_os_error(exc: OSError, action: str, path: object) -> CoreFileError:
    """Return the typed error matching ``exc`` for ``action`` on ``path``."""
    detail = exc.strerror or str(exc)
    message = f"Failed to {action} {path}: {detail}"
    fields = {"code": exc.errno, "path": path, "strerror": exc.strerror}
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return os_error(NotFoundError, message, **fields)
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return os_error(PermissionDeniedError, message, **fields)
    if isinstance(exc, FileExistsError) or exc.errno == errno.EEXIST:
        return os_error(AlreadyExistsError, message, **fields)
    return os_error(IoFailureError, message, **fields)


@contextmanager
def os_errors(action: str, path: object) -> Iterator[None]:
    """Re-raise any ``OSError`` from the block as a typed corefile error."""
    try:
        yield
    except CoreFileError:
        raise
    except OSError as exc:
        raise translate_os_error(exc, action, path) from exc
