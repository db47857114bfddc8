"""Shared pytest fixtures for tracker tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from freshfile import reset_default


@pytest.fixture()
def cache_path(tmp_path: Path) -> Path:
    """Return a cache file location inside a not-yet-existing directory."""
    return tmp_path / "cache" / ".fresh-file"


@pytest.fixture()
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a file and pins its mtime."""

    def _make(name: str, mtime: int = 1_000_000, content: str = "data\n") -> Path:
        path = tmp_path / "work" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            path.write_text(content, encoding="utf-8")
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture(autouse=True)
def _isolated_default() -> Iterator[None]:
    reset_default()
    yield
    reset_default()
