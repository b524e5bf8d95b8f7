"""Pytest configuration for the sqlite_testdb test suite.

Provides small on-disk inputs shared across test modules: a source database
holding one ``account`` row and a helper that writes schema files. The
package's own pytest fixtures are imported here so the suite also runs from a
source checkout where the ``pytest11`` entry point is not installed.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Callable

import pytest

from sqlite_testdb.pytest_plugin import sqlite_memory_db, sqlite_testdb_factory  # noqa: F401

SchemaWriter = Callable[..., Path]


@pytest.fixture()
def source_db(tmp_path: Path) -> Path:
    """Create a database file with ``account(name='Gene')`` and return its path."""
    path = tmp_path / "source.db"
    conn = sqlite3.connect(str(path))
    try:
        conn.execute("CREATE TABLE account (id INTEGER PRIMARY KEY, name TEXT NOT NULL)")
        conn.execute("INSERT INTO account (name) VALUES ('Gene')")
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture()
def write_schema(tmp_path: Path) -> SchemaWriter:
    """Return a helper writing ``text`` to a UTF-8 schema file under ``tmp_path``."""

    def _write(text: str, name: str = "schema.sql") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def schema_file(write_schema: SchemaWriter) -> Path:
    """A two-statement schema creating and populating ``account``."""
    return write_schema(
        "-- accounts used by the provisioner tests\n"
        "CREATE TABLE account (\n"
        "    id INTEGER PRIMARY KEY,\n"
        "    name TEXT NOT NULL\n"
        ");\n"
        "\n"
        "INSERT INTO account (name) VALUES ('Gene');\n"
    )
