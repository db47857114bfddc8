"""Lazily loaded, explicitly persisted path metadata store."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from freshfile.cache.payload import new_payload, normalize_payload
from freshfile.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX
from freshfile.exceptions import CacheWriteError
from freshfile.io import load_json_file, write_json_atomic
from freshfile.types import MetadataPayload, MetadataRecord, RecordedMtime

logger = logging.getLogger(__name__)


class LoadState(Enum):
    """Lifecycle of the in-memory store relative to its backing file."""

    UNLOADED = "unloaded"
    EMPTY = "empty"
    LOADED = "loaded"


class MetadataStore:
    """Mapping of path to recorded mtime and related paths, backed by a JSON file.

    The backing file is read at most once, on the first call to
    :meth:`ensure_loaded`. After that the in-memory records are authoritative
    and external edits to the file are ignored. :meth:`persist` overwrites the
    whole file and does nothing while the store is still unloaded, so an
    unused store never clobbers an existing cache.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._records: dict[str, MetadataRecord] = {}
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def state(self) -> LoadState:
        if not self._loaded:
            return LoadState.UNLOADED
        return LoadState.LOADED if self._records else LoadState.EMPTY

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, path: object) -> bool:
        return path in self._records

    def paths(self) -> list[str]:
        """Return tracked paths in insertion order."""
        return list(self._records)

    def ensure_loaded(self) -> None:
        """Read the backing file once; missing or corrupt files yield an empty store."""
        if self._loaded:
            return
        self._loaded = True

        if not self._path.is_file():
            logger.debug("No metadata cache at %s, starting empty", self._path)
            return

        try:
            raw = load_json_file(self._path)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable metadata cache %s: %s", self._path, exc)
            return

        records = normalize_payload(raw)
        if records is None:
            logger.warning("Ignoring metadata cache with unexpected layout: %s", self._path)
            return

        self._records = records
        logger.debug("Loaded %d metadata records from %s", len(records), self._path)

    def get_mtime(self, path: str, default: RecordedMtime) -> RecordedMtime:
        self.ensure_loaded()
        record = self._records.get(path)
        if record is None or "mtime" not in record:
            return default
        return record["mtime"]

    def set_mtime(self, path: str, mtime: RecordedMtime) -> None:
        self.ensure_loaded()
        self._records.setdefault(path, {})["mtime"] = None if mtime is None else int(mtime)

    def get_related(self, path: str) -> list[str] | None:
        self.ensure_loaded()
        record = self._records.get(path)
        if record is None or "related" not in record:
            return None
        return list(record["related"])

    def set_related(self, path: str, related: list[str]) -> None:
        self.ensure_loaded()
        self._records.setdefault(path, {})["related"] = list(related)

    def snapshot(self) -> MetadataPayload:
        """Return a detached copy of the payload as it would be persisted."""
        files: dict[str, MetadataRecord] = {}
        for path, record in self._records.items():
            copied: MetadataRecord = {}
            if "mtime" in record:
                copied["mtime"] = record["mtime"]
            if "related" in record:
                copied["related"] = list(record["related"])
            files[path] = copied
        return new_payload(files)

    def persist(self) -> bool:
        """Write the full store to disk; return False when nothing was loaded."""
        if not self._loaded:
            logger.debug("Metadata store never loaded, skipping write to %s", self._path)
            return False

        try:
            write_json_atomic(
                path=self._path,
                payload=self.snapshot(),
                temp_prefix=CACHE_TEMP_PREFIX,
                temp_suffix=CACHE_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheWriteError(f"Failed to write metadata cache {self._path}: {exc}") from exc

        logger.debug("Wrote %d metadata records to %s", len(self._records), self._path)
        return True

    def persist_on_teardown(self) -> None:
        """Persist from a finalizer, where no caller is left to receive errors."""
        try:
            self.persist()
        except CacheWriteError as exc:
            logger.warning("Metadata cache not saved at teardown: %s", exc)
