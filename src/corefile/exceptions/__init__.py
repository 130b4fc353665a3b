"""Shared exception hierarchy for corefile."""

from __future__ import annotations

from .base import CoreFileError
from .config import ConfigError
from .io import (
    AlreadyExistsError,
    IoFailureError,
    NotFoundError,
    PermissionDeniedError,
    UnsupportedOperationError,
)
from .modes import InvalidModeError

__all__ = [
    "AlreadyExistsError",
    "ConfigError",
    "CoreFileError",
    "InvalidModeError",
    "IoFailureError",
    "NotFoundError",
    "PermissionDeniedError",
    "UnsupportedOperationError",
]
