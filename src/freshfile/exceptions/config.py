"""Configuration-related exceptions."""

from __future__ import annotations

from freshfile.exceptions.base import FreshFileError


class ConfigError(FreshFileError, ValueError):
    """Raised when tracker configuration is invalid."""
