"""Shared file I/O helpers."""

from .files import read_mtime
from .json_io import load_json_file, write_json_atomic

__all__ = ["load_json_file", "read_mtime", "write_json_atomic"]
