"""Process-wide default tracker.

Convenience only: code that passes :class:`FreshnessTracker` instances around
explicitly never needs this module.
"""

from __future__ import annotations

import logging

from freshfile.config.model import default_cache_path
from freshfile.tracker import FreshnessTracker

logger = logging.getLogger(__name__)

_default: FreshnessTracker | None = None


def get_default() -> FreshnessTracker:
    """Return the designated default tracker, creating one under the temp dir on first use."""
    global _default
    if _default is None:
        _default = FreshnessTracker(default_cache_path())
        logger.debug("Created default tracker at %s", _default.cache_path)
    return _default


def designate_as_default(tracker: FreshnessTracker) -> FreshnessTracker:
    """Replace the default tracker; the previous one is not closed."""
    global _default
    _default = tracker
    return tracker


def reset_default() -> None:
    global _default
    _default = None
