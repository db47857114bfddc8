"""Tracker configuration loading."""

from __future__ import annotations

from freshfile.config.loader import load_config
from freshfile.config.model import TrackerConfig, default_cache_path

__all__ = ["TrackerConfig", "default_cache_path", "load_config"]
