"""Construction and validation of persisted cache payloads."""

from __future__ import annotations

import logging

from freshfile.constants.cache import CACHE_VERSION
from freshfile.types import MetadataPayload, MetadataRecord

logger = logging.getLogger(__name__)


def new_payload(files: dict[str, MetadataRecord] | None = None) -> MetadataPayload:
    """Return a payload wrapping ``files`` (empty when omitted)."""
    return {
        "version": CACHE_VERSION,
        "files": files if files is not None else {},
    }


def normalize_payload(payload: object) -> dict[str, MetadataRecord] | None:
    """Extract the per-path records from a decoded cache document.

    Returns ``None`` when the document as a whole is unusable (wrong type,
    unknown version, missing ``files`` mapping). Individual malformed records
    are dropped and the rest are kept.
    """
    if not isinstance(payload, dict):
        return None
    if payload.get("version") != CACHE_VERSION:
        return None

    raw_files = payload.get("files")
    if not isinstance(raw_files, dict):
        return None

    files: dict[str, MetadataRecord] = {}
    for key, value in raw_files.items():
        record = _normalize_record(value)
        if not isinstance(key, str) or record is None:
            logger.debug("Dropping malformed cache record for %r", key)
            continue
        files[key] = record
    return files


def _normalize_record(value: object) -> MetadataRecord | None:
    if not isinstance(value, dict):
        return None

    record: MetadataRecord = {}
    if "mtime" in value:
        mtime = value["mtime"]
        if mtime is not None and (isinstance(mtime, bool) or not isinstance(mtime, int)):
            return None
        record["mtime"] = mtime
    if "related" in value:
        related = value["related"]
        if not isinstance(related, list) or not all(isinstance(item, str) for item in related):
            return None
        record["related"] = list(related)
    return record
