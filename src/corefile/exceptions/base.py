"""Root of the corefile exception hierarchy."""

from __future__ import annotations


class CoreFileError(Exception):
    """Base class for every error raised by corefile."""

    def __str__(self) -> str:
        # OSError subclasses would otherwise render as "[Errno N] strerror: 'filename'".
        if len(self.args) == 1:
            return str(self.args[0])
        return super().__str__()
