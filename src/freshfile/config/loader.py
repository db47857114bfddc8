"""Config loading and normalization for ``freshfile.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from freshfile.config.model import TrackerConfig, default_cache_path
from freshfile.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_PERSIST_ON_TEARDOWN,
)
from freshfile.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> TrackerConfig:
    """Load tracker settings from ``freshfile.yaml`` under ``root`` or an explicit path.

    A relative ``cache_path`` is resolved against ``root``. When no explicit
    path is given and ``root`` has no config file, defaults are returned.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return TrackerConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    cache_path_raw = raw.get("cache_path")
    if cache_path_raw is None:
        cache_path = default_cache_path()
    elif isinstance(cache_path_raw, str) and cache_path_raw.strip():
        cache_path = Path(cache_path_raw).expanduser()
        if not cache_path.is_absolute():
            cache_path = root / cache_path
    else:
        raise ConfigError("cache_path must be a non-empty string")

    persist_on_teardown = raw.get("persist_on_teardown", DEFAULT_PERSIST_ON_TEARDOWN)
    if not isinstance(persist_on_teardown, bool):
        raise ConfigError("persist_on_teardown must be a boolean")

    logger.debug("Loaded tracker config from %s", path)
    return TrackerConfig(cache_path=cache_path, persist_on_teardown=persist_on_teardown)
