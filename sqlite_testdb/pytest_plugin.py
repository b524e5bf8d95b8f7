"""pytest fixtures for disposable SQLite databases.

Registered through the ``pytest11`` entry point, so installing the package is
enough. Projects that vendor it instead can import the fixtures into their
``conftest.py``.

Fixtures
--------
``sqlite_testdb_factory``
    Callable with the ``TestDatabaseProvisioner`` signature. Every handle the
    factory opened is closed and every provisioner cleaned up at teardown.
``sqlite_memory_db``
    An open connection to an in-memory database.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Callable, Iterator, List

import pytest

from .provisioner import TestDatabaseProvisioner

ProvisionerFactory = Callable[..., TestDatabaseProvisioner]


def _teardown(provisioners: List[TestDatabaseProvisioner]) -> None:
    for provisioner in reversed(provisioners):
        # only close handles that were actually opened
        conn = provisioner.__dict__.get("connection")
        if conn is not None:
            conn.close()
        provisioner.cleanup()


@pytest.fixture()
def sqlite_testdb_factory() -> Iterator[ProvisionerFactory]:
    """Yield a factory building provisioners that are torn down after the test.

    Example
    -------
    def test_accounts(sqlite_testdb_factory):
        db = sqlite_testdb_factory(schema="tests/schema.sql")
        assert db.connection.execute("SELECT count(*) FROM account").fetchone() == (1,)
    """
    created: List[TestDatabaseProvisioner] = []

    def _factory(**kwargs: Any) -> TestDatabaseProvisioner:
        provisioner = TestDatabaseProvisioner(**kwargs)
        created.append(provisioner)
        return provisioner

    try:
        yield _factory
    finally:
        _teardown(created)


@pytest.fixture()
def sqlite_memory_db(sqlite_testdb_factory: ProvisionerFactory) -> sqlite3.Connection:
    """Provision an in-memory database and return its open connection."""
    return sqlite_testdb_factory(memory=True).connection


__all__ = ["sqlite_testdb_factory", "sqlite_memory_db"]
