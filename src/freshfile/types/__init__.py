"""Shared type aliases for freshfile."""

from .cache import MetadataPayload, MetadataRecord, PathInput, RecordedMtime

__all__ = ["MetadataPayload", "MetadataRecord", "PathInput", "RecordedMtime"]
