"""Modification-time based freshness tracking for files and their dependencies."""

from __future__ import annotations

import logging
import os
import weakref
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Self

from freshfile.cache import LoadState, MetadataStore
from freshfile.constants.cache import DEFAULT_RECORDED_MTIME
from freshfile.exceptions import CacheDirectoryError
from freshfile.io import read_mtime
from freshfile.types import PathInput, RecordedMtime

if TYPE_CHECKING:
    from freshfile.config import TrackerConfig

logger = logging.getLogger(__name__)


class FreshnessTracker:
    """Answer "did any of these files change since last time?" from a persisted mtime cache.

    Each tracked path has a recorded modification time and an optional list of
    related paths. :meth:`is_fresh` compares current mtimes against the
    recorded ones and records the current readings as it goes.

    The cache file is read lazily on first access and written by
    :meth:`close`, on leaving a ``with`` block, or when the tracker is garbage
    collected or the interpreter exits. The last two only happen when
    ``persist_on_teardown`` is true.
    """

    def __init__(self, cache_path: str | os.PathLike[str], persist_on_teardown: bool = True) -> None:
        self._cache_path = Path(cache_path)
        self._persist_on_teardown = persist_on_teardown

        directory = self._cache_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheDirectoryError(f"Cannot create cache directory {directory}: {exc}") from exc

        self._store = MetadataStore(self._cache_path)
        if persist_on_teardown:
            weakref.finalize(self, self._store.persist_on_teardown)

    @classmethod
    def create(cls, cache_path: str | os.PathLike[str], persist_on_teardown: bool = True) -> Self:
        return cls(cache_path, persist_on_teardown)

    @classmethod
    def from_config(cls, config: TrackerConfig) -> Self:
        """Build a tracker from a loaded :class:`~freshfile.config.TrackerConfig`."""
        return cls(config.cache_path, config.persist_on_teardown)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cache_path={str(self._cache_path)!r}, "
            f"persist_on_teardown={self._persist_on_teardown!r})"
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._persist_on_teardown:
            self.close()

    @property
    def cache_path(self) -> Path:
        return self._cache_path

    @property
    def persist_on_teardown(self) -> bool:
        return self._persist_on_teardown

    @property
    def is_loaded(self) -> bool:
        return self._store.state is not LoadState.UNLOADED

    def get_cache_path(self) -> Path:
        return self._cache_path

    def designate_as_default(self) -> Self:
        """Make this tracker the one returned by :func:`freshfile.get_default`."""
        from freshfile.default import designate_as_default

        designate_as_default(self)
        return self

    def is_fresh(self, paths: PathInput, clear_stat_cache: bool = False) -> bool:
        """Return True if any of ``paths`` or their related files changed since last recorded.

        Related files are expanded one level: the related files of a related
        file are not consulted. Every examined path has its current mtime
        recorded, whatever the result, so an immediate second call with no
        filesystem changes returns False.

        ``clear_stat_cache`` is accepted for callers ported from runtimes that
        memoize stat results. ``os.stat`` is never memoized, so each check
        already reads the filesystem.
        """
        requested = _collect_paths(paths)
        candidates = dict.fromkeys(requested)
        for path in requested:
            candidates.update(dict.fromkeys(self.get_related_files(path)))

        if clear_stat_cache:
            logger.debug("Stat cache clear requested for %d paths", len(candidates))

        any_fresh = False
        for path in candidates:
            current = self.get_filemtime_current(path)
            recorded = self.get_filemtime_metadata(path)
            if _is_newer(current, recorded):
                logger.debug("Changed since last check: %s", path)
                any_fresh = True
            self.set_filemtime(path, current)

        return any_fresh

    def get_filemtime_current(self, path: str | os.PathLike[str]) -> RecordedMtime:
        """Return the current mtime of ``path``, or ``None`` when it cannot be read."""
        return read_mtime(os.fspath(path))

    def get_filemtime_metadata(
        self,
        path: str | os.PathLike[str],
        default: RecordedMtime = DEFAULT_RECORDED_MTIME,
    ) -> RecordedMtime:
        """Return the recorded mtime of ``path``; ``default`` if it was never recorded."""
        return self._store.get_mtime(os.fspath(path), default)

    def set_filemtime(self, path: str | os.PathLike[str], mtime: RecordedMtime) -> Self:
        self._store.set_mtime(os.fspath(path), mtime)
        return self

    def set_related_files(self, path: str | os.PathLike[str], related: PathInput) -> Self:
        """Replace the related files declared for ``path``."""
        self._store.set_related(os.fspath(path), _collect_paths(related, dedupe=False))
        return self

    def get_related_files(self, path: str | os.PathLike[str], default: list[str] | None = None) -> list[str]:
        related = self._store.get_related(os.fspath(path))
        if related is None:
            return list(default) if default is not None else []
        return related

    def write_metadata_file(self) -> bool:
        """Persist the store now; return False if it was never loaded and nothing was written."""
        return self._store.persist()

    def close(self) -> None:
        """Write the metadata cache, regardless of ``persist_on_teardown``.

        Raises:
            CacheWriteError: If the cache file cannot be written.
        """
        self.write_metadata_file()


def _collect_paths(paths: PathInput, *, dedupe: bool = True) -> list[str]:
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    collected = [os.fspath(path) for path in paths]
    return list(dict.fromkeys(collected)) if dedupe else collected


def _is_newer(current: RecordedMtime, recorded: RecordedMtime) -> bool:
    # Unknown current time never wins; unknown recorded time compares as zero.
    if current is None:
        return False
    return current > (recorded or 0)
