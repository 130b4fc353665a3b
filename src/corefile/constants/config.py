"""Configuration defaults and filenames."""

from __future__ import annotations

import os

CONFIG_FILENAME: str = "corefile.yaml"

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_ERRORS: str = "surrogateescape"
DEFAULT_NEWLINE: str = os.linesep
DEFAULT_ATOMIC_COPY: bool = True
DEFAULT_TEMP_PREFIX: str = ".corefile-"
DEFAULT_TEMP_SUFFIX: str = ".tmp"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "encoding",
        "errors",
        "newline",
        "atomic_copy",
        "temp_prefix",
        "temp_suffix",
    }
)

NEWLINE_ALIASES: dict[str, str] = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
    "native": os.linesep,
}

VALID_ERROR_HANDLERS: frozenset[str] = frozenset(
    {
        "strict",
        "ignore",
        "replace",
        "surrogateescape",
        "backslashreplace",
    }
)

# Terminators read_all_lines splits on; any other newline breaks the lines round trip.
VALID_NEWLINES: frozenset[str] = frozenset({"\n", "\r\n", "\r"})
