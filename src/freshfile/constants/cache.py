"""Constants used by the metadata cache and its persistence."""

from __future__ import annotations

CACHE_VERSION: int = 1
CACHE_FILENAME: str = ".fresh-file"
CACHE_TEMP_PREFIX: str = ".fresh-file-"
CACHE_TEMP_SUFFIX: str = ".tmp"

# Recorded mtime returned for paths that were never examined.
DEFAULT_RECORDED_MTIME: int = 0
