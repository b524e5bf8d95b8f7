"""SQLite engine helpers for test database provisioning.

Purpose
-------
Provide the three engine-facing capabilities the provisioner needs: turning a
materialized database location into a connection string, opening a handle
from that string, and a scoped bootstrap connection used while a schema is
being loaded.

External dependencies
---------------------
- Standard library only (``sqlite3``).

Connection strings
------------------
Connection strings are SQLite URIs and are always opened with ``uri=True``:

- in-memory: ``file::memory:``
- file: ``file:///abs/path.db?mode=rw``. ``mode=rw`` makes opening a
  database whose ephemeral file has already been removed fail instead of
  silently creating an empty one.

Fallback semantics
------------------
No fallback is implemented at this layer; engine errors are wrapped in
``DatabaseConnectionError`` and propagated.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from ...base.dto import ConnectionOptions
from ...base.errors import DatabaseConnectionError
from ...base.logging import get_logger, log_event
from ...config.defaults import (
    MANUAL_COMMIT_ISOLATION_LEVEL,
    SQLITE_MEMORY_TOKEN,
    SQLITE_URI_SCHEME,
)

logger = get_logger(__name__)

Location = Union[str, "os.PathLike[str]"]


def is_memory(location: Location) -> bool:
    return isinstance(location, str) and location == SQLITE_MEMORY_TOKEN


def format_dsn(location: Location) -> str:
    """Return the SQLite URI for a materialized database location.

    Parameters
    ----------
    location:
        The in-memory token or anything path-like (``str``, ``Path``,
        ``EphemeralDatabaseFile``).

    Returns
    -------
    str
        A URI suitable for ``sqlite3.connect(dsn, uri=True)``.
    """
    if is_memory(location):
        return f"{SQLITE_URI_SCHEME}{SQLITE_MEMORY_TOKEN}"
    path = Path(os.fspath(location)).resolve()
    return f"{path.as_uri()}?mode=rw"


def create_connection(
    dsn: str, options: Optional[ConnectionOptions] = None
) -> sqlite3.Connection:
    """Open a SQLite connection from a connection string and options.

    Behavior
    --------
    - ``auto_commit`` maps to ``isolation_level=None``; otherwise the legacy
      ``DEFERRED`` transaction control is used and the caller commits.
    - ``timeout``, ``detect_types`` and ``check_same_thread`` are forwarded.
    - Rows come back as plain tuples; callers may set ``row_factory``.

    Raises
    ------
    DatabaseConnectionError
        If the engine cannot open the target.
    """
    opts = options or ConnectionOptions()
    isolation_level = None if opts.auto_commit else MANUAL_COMMIT_ISOLATION_LEVEL
    try:
        conn = sqlite3.connect(
            dsn,
            uri=True,
            isolation_level=isolation_level,
            **opts.connect_kwargs(),
        )
    except sqlite3.Error as exc:
        raise DatabaseConnectionError(f"Can't connect to {dsn}", path=dsn, raw=exc) from exc
    log_event(logger, "connection.open", dsn=dsn, auto_commit=opts.auto_commit, level=logging.DEBUG)
    return conn


@contextmanager
def bootstrap_session(path: Location) -> Iterator[sqlite3.Connection]:
    """Context manager yielding a connection inside one explicit transaction.

    Transaction semantics
    ---------------------
    - Auto-commit is off: ``BEGIN`` is issued up front, so DDL and DML share
      the one transaction.
    - Commits when the context exits normally.
    - Rolls back if an exception is raised inside the context.
    - Always closes the connection on exit.

    Raises
    ------
    DatabaseConnectionError
        If the file cannot be opened.
    """
    target = os.fspath(path)
    try:
        conn = sqlite3.connect(target, isolation_level=None)
    except sqlite3.Error as exc:
        raise DatabaseConnectionError(f"Can't connect to {target}", path=target, raw=exc) from exc
    try:
        conn.execute("BEGIN")
        yield conn
        conn.commit()
    except Exception:
        if conn.in_transaction:
            conn.rollback()
        raise
    finally:
        conn.close()


__all__ = [
    "is_memory",
    "format_dsn",
    "create_connection",
    "bootstrap_session",
]
