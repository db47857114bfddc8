"""Metadata cache: in-memory store and its on-disk payload."""

from __future__ import annotations

from .payload import new_payload, normalize_payload
from .store import LoadState, MetadataStore

__all__ = ["LoadState", "MetadataStore", "new_payload", "normalize_payload"]
