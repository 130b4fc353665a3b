"""corefile package: whole-file helpers over platform file I/O."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from corefile.config import DEFAULT_CONFIG, CoreFileConfig, load_config
from corefile.exceptions import (
    AlreadyExistsError,
    ConfigError,
    CoreFileError,
    InvalidModeError,
    IoFailureError,
    NotFoundError,
    PermissionDeniedError,
    UnsupportedOperationError,
)
from corefile.file import (
    append_all_lines,
    append_all_text,
    copy,
    create,
    create_text,
    delete,
    exists,
    get_creation_time,
    get_creation_time_utc,
    get_last_access_time,
    get_last_access_time_utc,
    get_last_write_time,
    get_last_write_time_utc,
    get_size,
    get_stream_size,
    move,
    open_file,
    open_read,
    open_text,
    open_write,
    read_all_bytes,
    read_all_lines,
    read_all_text,
    set_creation_time,
    set_creation_time_utc,
    set_last_access_time,
    set_last_access_time_utc,
    set_last_write_time,
    set_last_write_time_utc,
    supports_set_creation_time,
    write_all_bytes,
    write_all_lines,
    write_all_text,
)
from corefile.modes import FileAccess, FileMode, parse_mode

__all__ = [
    "DEFAULT_CONFIG",
    "AlreadyExistsError",
    "ConfigError",
    "CoreFileConfig",
    "CoreFileError",
    "FileAccess",
    "FileMode",
    "InvalidModeError",
    "IoFailureError",
    "NotFoundError",
    "PermissionDeniedError",
    "UnsupportedOperationError",
    "__version__",
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
    "load_config",
    "move",
    "open_file",
    "open_read",
    "open_text",
    "open_write",
    "parse_mode",
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

try:
    __version__ = version("corefile")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
