"""Config loading and normalization for corefile."""

from __future__ import annotations

import codecs
import difflib
from pathlib import Path
from typing import Any

import yaml

from corefile.config.model import CoreFileConfig
from corefile.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_ATOMIC_COPY,
    DEFAULT_ENCODING,
    DEFAULT_ERRORS,
    DEFAULT_NEWLINE,
    DEFAULT_TEMP_PREFIX,
    DEFAULT_TEMP_SUFFIX,
    NEWLINE_ALIASES,
    VALID_ERROR_HANDLERS,
    VALID_NEWLINES,
)
from corefile.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> CoreFileConfig:
    """Load and validate settings from ``corefile.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CoreFileConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            raise ConfigError(f"Unknown config key {key!r}" + (f", {hint}" if hint else ""))

    encoding = _ensure_string(raw.get("encoding", DEFAULT_ENCODING), "encoding")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"encoding must name a known codec, got {encoding!r}") from exc

    errors = _ensure_string(raw.get("errors", DEFAULT_ERRORS), "errors")
    if errors not in VALID_ERROR_HANDLERS:
        raise ConfigError(f"errors must be one of {sorted(VALID_ERROR_HANDLERS)}, got {errors!r}")

    atomic_copy = raw.get("atomic_copy", DEFAULT_ATOMIC_COPY)
    if not isinstance(atomic_copy, bool):
        raise ConfigError("atomic_copy must be a boolean")

    return CoreFileConfig(
        encoding=encoding,
        errors=errors,
        newline=_normalize_newline(raw.get("newline", DEFAULT_NEWLINE)),
        atomic_copy=atomic_copy,
        temp_prefix=_ensure_string(raw.get("temp_prefix", DEFAULT_TEMP_PREFIX), "temp_prefix"),
        temp_suffix=_ensure_string(raw.get("temp_suffix", DEFAULT_TEMP_SUFFIX), "temp_suffix"),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Require a non-empty string, raising ConfigError otherwise."""
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value


def _normalize_newline(value: Any) -> str:
    """Resolve a newline alias (``lf``, ``crlf``, ...) and require a terminator lines can split on."""
    newline = _ensure_string(value, "newline")
    newline = NEWLINE_ALIASES.get(newline.lower(), newline)
    if newline not in VALID_NEWLINES:
        raise ConfigError(f"newline must be lf, crlf, cr, native or one of {sorted(VALID_NEWLINES)!r}, got {newline!r}")
    return newline


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
