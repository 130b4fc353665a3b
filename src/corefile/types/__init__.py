"""Shared type aliases for corefile."""

from .common import FileStream, StrPath, TimeValue

__all__ = ["FileStream", "StrPath", "TimeValue"]
