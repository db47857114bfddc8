"""Filesystem probes used by freshness checks."""

from __future__ import annotations

import os

from freshfile.types import RecordedMtime


def read_mtime(path: str) -> RecordedMtime:
    """Return the whole-second modification time of ``path``, or ``None`` if unreadable.

    A zero timestamp is reported as ``None`` as well, so callers only ever see
    positive integers or the unknown sentinel. Paths the OS cannot represent,
    such as ones with an embedded NUL, are treated as unreadable.
    """
    try:
        if not os.access(path, os.R_OK):
            return None
        mtime = int(os.stat(path).st_mtime)
    except (OSError, ValueError):
        return None
    return mtime or None
