"""File size measurement."""

from __future__ import annotations

import os

from corefile.file.common import require_file
from corefile.file.streams import open_read
from corefile.io.errors import os_errors
from corefile.types import FileStream, StrPath


def get_stream_size(stream: FileStream) -> int:
    """Measure ``stream`` by seeking to both ends, then restore its position."""
    with os_errors("measure", getattr(stream, "name", "<stream>")):
        current = stream.tell()
        stream.seek(0, os.SEEK_SET)
        begin = stream.tell()
        stream.seek(0, os.SEEK_END)
        end = stream.tell()
        stream.seek(current, os.SEEK_SET)
    return end - begin


def get_size(target: StrPath | FileStream, *, missing_ok: bool = False) -> int:
    """Return the size in bytes of a file path or an open stream."""
    if not isinstance(target, (str, os.PathLike)):
        return get_stream_size(target)
    if not require_file(target, "measure", missing_ok=missing_ok):
        return 0
    with open_read(target) as stream:
        return get_stream_size(stream)
