"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "corefile"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: whole-file read, write, copy, move and timestamp helpers"
