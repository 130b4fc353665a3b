"""Shared file I/O helpers."""

from .atomic import write_bytes_atomic
from .errors import os_error, os_errors, translate_os_error

__all__ = ["os_error", "os_errors", "translate_os_error", "write_bytes_atomic"]
