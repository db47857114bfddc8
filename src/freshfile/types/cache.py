"""Typed cache payload structures."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import NotRequired, TypeAlias, TypedDict

# ``None`` stands for a modification time that could not be read.
RecordedMtime: TypeAlias = int | None
PathInput: TypeAlias = str | os.PathLike[str] | Iterable[str | os.PathLike[str]]


class MetadataRecord(TypedDict):
    """Recorded state for a single tracked path."""

    mtime: NotRequired[RecordedMtime]
    related: NotRequired[list[str]]


class MetadataPayload(TypedDict):
    """Top-level cache payload persisted to disk."""

    version: int
    files: dict[str, MetadataRecord]
