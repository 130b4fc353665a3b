"""Config data model for corefile operations."""

from __future__ import annotations

from dataclasses import dataclass

from corefile.constants.config import (
    DEFAULT_ATOMIC_COPY,
    DEFAULT_ENCODING,
    DEFAULT_ERRORS,
    DEFAULT_NEWLINE,
    DEFAULT_TEMP_PREFIX,
    DEFAULT_TEMP_SUFFIX,
)


@dataclass(frozen=True)
class CoreFileConfig:
    """Resolved settings shared by the file facade."""

    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ERRORS
    newline: str = DEFAULT_NEWLINE
    atomic_copy: bool = DEFAULT_ATOMIC_COPY
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    temp_suffix: str = DEFAULT_TEMP_SUFFIX


DEFAULT_CONFIG: CoreFileConfig = CoreFileConfig()
