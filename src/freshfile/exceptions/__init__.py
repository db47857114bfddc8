"""Shared exception hierarchy for freshfile."""

from __future__ import annotations

from .base import FreshFileError
from .cache import CacheDirectoryError, CacheWriteError
from .config import ConfigError

__all__ = ["CacheDirectoryError", "CacheWriteError", "ConfigError", "FreshFileError"]
