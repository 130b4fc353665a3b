"""Exceptions raised by file operations.

Each class also derives from the matching builtin so callers that already
catch ``OSError`` (or one of its subclasses) keep working.
"""

from __future__ import annotations

from corefile.exceptions.base import CoreFileError


class NotFoundError(CoreFileError, FileNotFoundError):
    """Raised when the file an operation needs does not exist."""


class PermissionDeniedError(CoreFileError, PermissionError):
    """Raised when the operating system refuses access to a file."""


class AlreadyExistsError(CoreFileError, FileExistsError):
    """Raised when a destination exists and overwriting was not requested."""


class IoFailureError(CoreFileError, OSError):
    """Raised for any other operating-system level I/O failure."""


class UnsupportedOperationError(CoreFileError, NotImplementedError):
    """Raised when an operation has no implementation on this platform."""
