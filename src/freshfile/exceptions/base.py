"""Root exception type."""

from __future__ import annotations


class FreshFileError(Exception):
    """Base class for all freshfile errors."""
