"""Configuration-related exceptions."""

from __future__ import annotations

from corefile.exceptions.base import CoreFileError


class ConfigError(CoreFileError, ValueError):
    """Raised when corefile configuration is invalid."""
