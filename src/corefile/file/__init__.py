"""Whole-file operations grouped by verb.

This package facade re-exports every operation so that callers can write
``from corefile.file import read_all_bytes`` without knowing the submodule.
"""

from __future__ import annotations

from corefile.file.manage import copy, delete, exists, move
from corefile.file.read import read_all_bytes, read_all_lines, read_all_text
from corefile.file.size import get_size, get_stream_size
from corefile.file.streams import create, create_text, open_file, open_read, open_text, open_write
from corefile.file.times import (
    get_creation_time,
    get_creation_time_utc,
    get_last_access_time,
    get_last_access_time_utc,
    get_last_write_time,
    get_last_write_time_utc,
    set_creation_time,
    set_creation_time_utc,
    set_last_access_time,
    set_last_access_time_utc,
    set_last_write_time,
    set_last_write_time_utc,
    supports_set_creation_time,
)
from corefile.file.write import (
    append_all_lines,
    append_all_text,
    write_all_bytes,
    write_all_lines,
    write_all_text,
)

__all__ = [
    "append_all_lines",
    "append_all_text",
    "copy",
    "create",
    "create_text",
    "delete",
    "exists",
    "get_creation_time",
    "get_creation_time_utc",
    "get_last_access_time",
    "get_last_access_time_utc",
    "get_last_write_time",
    "get_last_write_time_utc",
    "get_size",
    "get_stream_size",
    "move",
    "open_file",
    "open_read",
    "open_text",
    "open_write",
    "read_all_bytes",
    "read_all_lines",
    "read_all_text",
    "set_creation_time",
    "set_creation_time_utc",
    "set_last_access_time",
    "set_last_access_time_utc",
    "set_last_write_time",
    "set_last_write_time_utc",
    "supports_set_creation_time",
    "write_all_bytes",
    "write_all_lines",
    "write_all_text",
]
