"""File-mode exceptions."""

from __future__ import annotations

from corefile.exceptions.base import CoreFileError


class InvalidModeError(CoreFileError, ValueError):
    """Raised when a file-mode token is not part of the mode vocabulary."""
