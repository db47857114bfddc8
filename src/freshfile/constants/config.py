"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "freshfile.yaml"
DEFAULT_PERSIST_ON_TEARDOWN: bool = True

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"cache_path", "persist_on_teardown"})
