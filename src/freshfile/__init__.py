"""Freshfile: skip work when input files have not changed since the last run."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from freshfile.config import TrackerConfig, load_config
from freshfile.default import designate_as_default, get_default, reset_default
from freshfile.exceptions import CacheDirectoryError, CacheWriteError, ConfigError, FreshFileError
from freshfile.tracker import FreshnessTracker

__all__ = [
    "CacheDirectoryError",
    "CacheWriteError",
    "ConfigError",
    "FreshFileError",
    "FreshnessTracker",
    "TrackerConfig",
    "__version__",
    "designate_as_default",
    "get_default",
    "load_config",
    "reset_default",
]

try:
    __version__ = version("freshfile")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
