"""Closed file-mode vocabulary and its translation to open flags.

``FileMode`` members carry the legacy symbolic tokens as their values, so a
token string round-trips through ``FileMode(token)`` and ``mode.value``.
"""

from __future__ import annotations

from enum import Enum

from corefile.constants.modes import ACCESS_OS_FLAGS, BINARY_SUFFIX, O_BINARY, READ_APPEND_MODE
from corefile.exceptions import InvalidModeError


class FileAccess(Enum):
    """How a file is accessed, independent of text or binary handling."""

    READ = "r"
    WRITE = "w"
    READ_WRITE_OPEN = "r+"
    READ_WRITE_TRUNCATE = "w+"
    APPEND = "a"
    APPEND_TRUNCATE = "a+"


class FileMode(Enum):
    """Every supported combination of access and text/binary handling."""

    READ = "r"
    WRITE = "w"
    READ_WRITE_OPEN = "r+"
    READ_WRITE_TRUNCATE = "w+"
    APPEND = "a"
    APPEND_TRUNCATE = "a+"

    BINARY_READ = "rb"
    BINARY_WRITE = "wb"
    BINARY_READ_WRITE_OPEN = "r+b"
    BINARY_READ_WRITE_TRUNCATE = "w+b"
    BINARY_APPEND = "ab"
    BINARY_APPEND_TRUNCATE = "a+b"

    @classmethod
    def of(cls, access: FileAccess, *, binary: bool = False) -> FileMode:
        """Return the mode combining ``access`` with text or binary handling."""
        return cls(access.value + BINARY_SUFFIX if binary else access.value)

    @property
    def binary(self) -> bool:
        return self.value.endswith(BINARY_SUFFIX)

    @property
    def access(self) -> FileAccess:
        return FileAccess(self.value.removesuffix(BINARY_SUFFIX))

    @property
    def os_flags(self) -> int:
        """Flags passed to ``os.open`` for this mode."""
        flags = ACCESS_OS_FLAGS[self.access.value]
        if self.binary:
            flags |= O_BINARY
        return flags

    @property
    def stream_mode(self) -> str:
        """Mode string used to wrap an already opened descriptor.

        Both append accesses yield readable streams.
        """
        if self.access in (FileAccess.APPEND, FileAccess.APPEND_TRUNCATE):
            return READ_APPEND_MODE + BINARY_SUFFIX if self.binary else READ_APPEND_MODE
        return self.value


def parse_mode(mode: FileMode | str) -> FileMode:
    """Resolve a ``FileMode`` or legacy token, raising on unknown tokens."""
    if isinstance(mode, FileMode):
        return mode
    try:
        return FileMode(mode)
    except ValueError:
        valid = ", ".join(member.value for member in FileMode)
        raise InvalidModeError(f"Invalid file mode: {mode!r} (expected one of: {valid})") from None
