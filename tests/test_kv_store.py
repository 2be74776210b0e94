# tests/test_kv_store.py

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

import pytest

from task_keeper.storage.kv_store import FileKeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore


@pytest.fixture(params=["memory", "sqlite", "file"])
def any_kv(request: pytest.FixtureRequest, tmp_path: Path):
    if request.param == "memory":
        return MemoryKeyValueStore()
    if request.param == "sqlite":
        return SQLiteKeyValueStore(tmp_path / "kv.sqlite3")
    return FileKeyValueStore(tmp_path / "kv")


def test_set_get_delete(any_kv) -> None:
    assert any_kv.get("FavoriteTasks") is None

    any_kv.set("FavoriteTasks", b"[1]")
    assert any_kv.get("FavoriteTasks") == b"[1]"

    any_kv.set("FavoriteTasks", b"[2]")
    assert any_kv.get("FavoriteTasks") == b"[2]"

    any_kv.delete("FavoriteTasks")
    assert any_kv.get("FavoriteTasks") is None

    # deleting a missing key is a no-op
    any_kv.delete("FavoriteTasks")


def test_sqlite_persists_across_instances(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "kv.sqlite3"
    SQLiteKeyValueStore(db).set("k", b"\x00\x01binary")

    assert SQLiteKeyValueStore(db).get("k") == b"\x00\x01binary"

    conn = sqlite3.connect(str(db))
    try:
        (n,) = conn.execute("SELECT COUNT(*) FROM kv").fetchone()
    finally:
        conn.close()
    assert n == 1


def test_file_store_persists_and_leaves_no_tmp(tmp_path: Path) -> None:
    root = tmp_path / "kv"
    FileKeyValueStore(root).set("FavoriteTasks", b"[]")

    assert FileKeyValueStore(root).get("FavoriteTasks") == b"[]"
    assert [p.name for p in root.iterdir()] == ["FavoriteTasks.bin"]


@pytest.mark.parametrize("key", ["", "..", "a/b", "../escape"])
def test_file_store_rejects_unsafe_keys(tmp_path: Path, key: str) -> None:
    kv = FileKeyValueStore(tmp_path / "kv")
    with pytest.raises(ValueError):
        kv.set(key, b"x")


def test_file_store_failed_replace_keeps_old_value_and_no_tmp(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = tmp_path / "kv"
    kv = FileKeyValueStore(root)
    kv.set("FavoriteTasks", b"old")

    def _boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _boom)
    with pytest.raises(OSError):
        kv.set("FavoriteTasks", b"new")
    monkeypatch.undo()

    assert kv.get("FavoriteTasks") == b"old"
    assert [p.name for p in root.iterdir()] == ["FavoriteTasks.bin"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_file_store_writes_private_files(tmp_path: Path) -> None:
    kv = FileKeyValueStore(tmp_path / "kv")
    kv.set("FavoriteTasks", b"[]")
    mode = (tmp_path / "kv" / "FavoriteTasks.bin").stat().st_mode & 0o777
    assert mode == 0o600
