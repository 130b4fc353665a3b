"""Configuration model and loading for corefile."""

from __future__ import annotations

from corefile.config.loader import load_config
from corefile.config.model import DEFAULT_CONFIG, CoreFileConfig

__all__ = ["DEFAULT_CONFIG", "CoreFileConfig", "load_config"]
