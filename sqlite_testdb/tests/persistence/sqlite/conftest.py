"""Shared fixtures for SQLite persistence tests.

Provides a `conn` fixture opened on an isolated on-disk database per test and
a `RecordingConnection` double that captures every statement sent to it.
"""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterator, List

import pytest


class RecordingConnection:
    """Stand-in for ``sqlite3.Connection`` that records ``execute`` calls."""

    def __init__(self) -> None:
        self.statements: List[str] = []

    def execute(self, sql: str):
        self.statements.append(sql)


@pytest.fixture()
def conn(tmp_path: Path) -> Iterator[sqlite3.Connection]:
    """Provision a fresh SQLite connection on a temporary database file.

    Yields
    ------
    sqlite3.Connection
        Open connection; closed after the test completes.
    """
    connection = sqlite3.connect(str(tmp_path / "bootstrap.db"))
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture()
def recorder() -> RecordingConnection:
    return RecordingConnection()
