"""Config data model for freshness trackers."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from freshfile.constants.cache import CACHE_FILENAME
from freshfile.constants.config import DEFAULT_PERSIST_ON_TEARDOWN


def default_cache_path() -> Path:
    """Cache location used when none is configured: ``<temp dir>/.fresh-file``."""
    return Path(tempfile.gettempdir()) / CACHE_FILENAME


@dataclass(frozen=True)
class TrackerConfig:
    """Resolved tracker settings."""

    cache_path: Path = field(default_factory=default_cache_path)
    persist_on_teardown: bool = DEFAULT_PERSIST_ON_TEARDOWN
