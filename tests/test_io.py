"""Tests for JSON IO and filesystem probe helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from freshfile.io import load_json_file, read_mtime, write_json_atomic


def test_write_json_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "cache.json"
    temp_prefix = ".tmp-"
    temp_suffix = ".json"

    with pytest.raises(TypeError):
        write_json_atomic(
            path=out_path,
            payload={"bad": object()},
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_json_atomic_replaces_existing_file(tmp_path: Path) -> None:
    out_path = tmp_path / "cache.json"
    out_path.write_text('{"old": true}', encoding="utf-8")

    write_json_atomic(path=out_path, payload={"new": 1}, temp_prefix=".t-", temp_suffix=".tmp")

    assert load_json_file(out_path) == {"new": 1}
    assert out_path.read_text(encoding="utf-8").endswith("\n")


def test_read_mtime_returns_whole_seconds(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_text("x", encoding="utf-8")
    os.utime(path, (1_500_000.75, 1_500_000.75))

    assert read_mtime(str(path)) == 1_500_000


def test_read_mtime_treats_zero_as_unknown(tmp_path: Path) -> None:
    path = tmp_path / "epoch.txt"
    path.write_text("x", encoding="utf-8")
    os.utime(path, (0, 0))

    assert read_mtime(str(path)) is None


def test_read_mtime_missing_file(tmp_path: Path) -> None:
    assert read_mtime(str(tmp_path / "nope")) is None


def test_read_mtime_embedded_nul_is_unknown() -> None:
    assert read_mtime("bad\x00name") is None
