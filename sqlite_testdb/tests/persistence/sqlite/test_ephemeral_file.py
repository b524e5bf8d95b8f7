"""Lifetime of ephemeral database files."""
from __future__ import annotations

import gc
import os
from pathlib import Path

from sqlite_testdb.persistence.sqlite.ephemeral import EphemeralDatabaseFile


def test_creates_unique_empty_files(tmp_path: Path) -> None:
    a = EphemeralDatabaseFile(tmp_dir=str(tmp_path))
    b = EphemeralDatabaseFile(tmp_dir=str(tmp_path))
    assert a.path != b.path  # nosec B101
    assert a.path.exists() and a.path.stat().st_size == 0  # nosec B101
    assert a.path.name.startswith("sqlite-testdb-") and a.path.suffix == ".db"  # nosec B101


def test_is_path_like(tmp_path: Path) -> None:
    f = EphemeralDatabaseFile(tmp_dir=str(tmp_path))
    assert os.fspath(f) == f.filename == str(f.path)  # nosec B101


def test_cleanup_removes_file_and_sidecars(tmp_path: Path) -> None:
    f = EphemeralDatabaseFile(tmp_dir=str(tmp_path))
    for suffix in ("-journal", "-wal", "-shm"):
        Path(f.filename + suffix).write_bytes(b"x")
    f.cleanup()
    assert f.removed  # nosec B101
    assert list(tmp_path.iterdir()) == []  # nosec B101
    f.cleanup()  # idempotent


def test_context_manager_removes_file(tmp_path: Path) -> None:
    with EphemeralDatabaseFile(tmp_dir=str(tmp_path)) as f:
        path = f.path
        assert path.exists()  # nosec B101
    assert not path.exists()  # nosec B101
    assert "removed" in repr(f)  # nosec B101


def test_garbage_collection_removes_file(tmp_path: Path) -> None:
    f = EphemeralDatabaseFile(tmp_dir=str(tmp_path), suffix=".sqlite")
    path = f.path
    assert path.suffix == ".sqlite"  # nosec B101
    del f
    gc.collect()
    assert not path.exists()  # nosec B101


def test_cleanup_tolerates_file_already_gone(tmp_path: Path) -> None:
    f = EphemeralDatabaseFile(tmp_dir=str(tmp_path))
    f.path.unlink()
    f.cleanup()
    assert f.removed  # nosec B101
