"""Cache directory and cache file exceptions."""

from __future__ import annotations

from freshfile.exceptions.base import FreshFileError


class CacheDirectoryError(FreshFileError, OSError):
    """Raised when the directory holding the cache file cannot be created."""


class CacheWriteError(FreshFileError, OSError):
    """Raised when the metadata cache cannot be written to disk."""
