"""Disposable SQLite databases for tests.

Purpose
-------
``TestDatabaseProvisioner`` turns one of three sources into a database a test
can use right away, then throws it away:

- ``database=``: copy an existing database file,
- ``schema=``: build a fresh database from a SQL schema file,
- ``memory=True``: use an in-memory database.

Usage
-----
::

    db = TestDatabaseProvisioner(schema="tests/schema.sql")
    conn = db.connection
    conn.execute("SELECT * FROM account").fetchall()
    conn.close()

    # explicit connection from the string and options
    conn = sqlite3.connect(db.dsn, uri=True)

Lifecycle
---------
Nothing touches the filesystem until it is needed. The stages are
unmaterialized -> materialized -> connected, each entered on first access of
``database_ref``, ``dsn`` and ``connection`` respectively and cached for the
lifetime of the instance. The ephemeral file is deleted when the provisioner
is garbage collected or ``cleanup()`` is called. The connection handle belongs
to the caller and is never closed here.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from .base.dto import ConnectionOptions, ProvisionerConfig
from .base.errors import ConfigurationError, CopyError, DatabaseConnectionError, classify_exception
from .base.logging import get_logger, log_event
from .base.log_support import LogContext
from .config import get_settings
from .config.defaults import SQLITE_MEMORY_TOKEN
from .persistence.sqlite.copier import copy_database
from .persistence.sqlite.engine import bootstrap_session, create_connection, format_dsn
from .persistence.sqlite.ephemeral import EphemeralDatabaseFile
from .persistence.sqlite.schema_loader import load_schema

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
DatabaseRef = Union[str, EphemeralDatabaseFile]


def _validation_message(exc: ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for err in exc.errors():
        msg = str(err.get("msg", ""))
        msg = msg.removeprefix("Value error, ")
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


class TestDatabaseProvisioner:
    """SQLite setup/teardown for tests.

    Parameters
    ----------
    database:
        Existing database file to copy into the test database.
    schema:
        SQL schema file used to create the test database. See
        ``sqlite_testdb.persistence.sqlite.schema_loader`` for the splitting
        rules; triggers are not supported.
    memory:
        Create the test database in memory.
    db_attrs:
        Connection options for ``connection``; a mapping or
        ``ConnectionOptions``. Default ``{raise_on_error: True,
        auto_commit: True}``.
    settings:
        Overrides for ``sqlite_testdb.config.get_settings`` (``tmp_dir``,
        ``prefix``, ``suffix``).

    Raises
    ------
    ConfigurationError
        If more than one source or none is given, if a given path is empty,
        missing or not a regular file, or if ``db_attrs`` is invalid.
    """

    # keep pytest from collecting this class when it is imported into a test module
    __test__ = False

    def __init__(
        self,
        database: Optional[PathLike] = None,
        schema: Optional[PathLike] = None,
        memory: Optional[bool] = None,
        db_attrs: Optional[Union[ConnectionOptions, Mapping[str, Any]]] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        raw: Dict[str, Any] = {}
        if database is not None:
            raw["database"] = os.fspath(database)
        if schema is not None:
            raw["schema_file"] = os.fspath(schema)
        if memory is not None:
            raw["memory"] = memory
        if db_attrs is not None:
            raw["db_attrs"] = dict(db_attrs) if isinstance(db_attrs, Mapping) else db_attrs
        try:
            self.config = ProvisionerConfig(**raw)
        except ValidationError as exc:
            raise ConfigurationError(_validation_message(exc), raw=exc) from exc
        self._settings = get_settings(settings)
        self._ctx = LogContext(
            source=self.config.source,
            source_path=str(self.config.source_path) if self.config.source_path else None,
        )
        log_event(logger, "provision.validated", self._ctx, level=logging.DEBUG)

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------
    @property
    def database(self) -> Optional[Path]:
        """The existing database copied to create the test database."""
        return self.config.database

    @property
    def schema(self) -> Optional[Path]:
        """The SQL schema used to create the test database."""
        return self.config.schema_file

    @property
    def memory(self) -> bool:
        return self.config.memory

    @property
    def has_database(self) -> bool:
        return self.config.database is not None

    @property
    def has_schema(self) -> bool:
        return self.config.schema_file is not None

    @property
    def has_memory(self) -> bool:
        return self.config.memory

    @property
    def db_attrs(self) -> ConnectionOptions:
        return self.config.db_attrs

    # ------------------------------------------------------------------
    # lazy stages
    # ------------------------------------------------------------------
    def _allocate_ephemeral(self) -> EphemeralDatabaseFile:
        """Reserve the ephemeral file, raising the source's typed error on failure.

        A copy that has nowhere to go is a ``CopyError``; a schema database
        that cannot be created is a ``DatabaseConnectionError``.
        """
        tmp_dir = self._settings.get("tmp_dir")
        try:
            return EphemeralDatabaseFile(
                tmp_dir=tmp_dir,
                prefix=self._settings["prefix"],
                suffix=self._settings["suffix"],
            )
        except OSError as exc:
            log_event(
                logger,
                "ephemeral.failed",
                self._ctx,
                target=tmp_dir,
                error_code=classify_exception(exc),
                level=logging.ERROR,
            )
            location = tmp_dir or "the default temporary directory"
            if self.has_database:
                raise CopyError(f"Can't create a copy target in {location}", path=tmp_dir, raw=exc) from exc
            raise DatabaseConnectionError(
                f"Can't create a database in {location}", path=tmp_dir, raw=exc
            ) from exc

    @cached_property
    def database_ref(self) -> DatabaseRef:
        """The materialized database: the in-memory token or an ephemeral file.

        Built on first access only. Intended for diagnostics; tests normally
        use ``dsn`` or ``connection``.
        """
        if self.has_memory:
            log_event(logger, "provision.materialize.done", self._ctx, target=SQLITE_MEMORY_TOKEN, level=logging.DEBUG)
            return SQLITE_MEMORY_TOKEN

        ephemeral = self._allocate_ephemeral()
        log_event(logger, "provision.materialize.start", self._ctx, target=ephemeral.filename, level=logging.DEBUG)
        try:
            if self.has_database:
                copy_database(self.config.database, ephemeral)
            elif self.has_schema:
                with bootstrap_session(ephemeral) as conn:
                    statements = load_schema(conn, self.config.schema_file)
                log_event(logger, "schema.loaded", self._ctx, target=ephemeral.filename, statements=statements)
        except Exception:
            ephemeral.cleanup()
            raise
        log_event(logger, "provision.materialize.done", self._ctx, target=ephemeral.filename)
        return ephemeral

    @cached_property
    def dsn(self) -> str:
        """The database connection string (a SQLite URI)."""
        return format_dsn(self.database_ref)

    @cached_property
    def connection(self) -> Optional[sqlite3.Connection]:
        """A connected handle based on ``dsn`` and ``db_attrs``.

        The caller owns the handle and should close it. When
        ``raise_on_error`` is false, a failed open is logged and ``None`` is
        returned (and cached) instead of raising.
        """
        try:
            return create_connection(self.dsn, self.db_attrs)
        except DatabaseConnectionError as exc:
            if self.db_attrs.raise_on_error:
                raise
            log_event(
                logger,
                "connection.failed",
                self._ctx,
                dsn=self.dsn,
                error=str(exc),
                error_code=classify_exception(exc),
                level=logging.WARNING,
            )
            return None

    @property
    def dbh(self) -> Optional[sqlite3.Connection]:
        """Alias of ``connection``."""
        return self.connection

    @property
    def path(self) -> Optional[Path]:
        """Filesystem path of the materialized database (``None`` in memory)."""
        ref = self.database_ref
        return ref.path if isinstance(ref, EphemeralDatabaseFile) else None

    # ------------------------------------------------------------------
    # teardown
    # ------------------------------------------------------------------
    def cleanup(self) -> None:
        """Delete the ephemeral file now rather than at garbage collection.

        Does nothing before materialization or for in-memory databases. The
        connection handle is left open.
        """
        ref = self.__dict__.get("database_ref")
        if isinstance(ref, EphemeralDatabaseFile):
            ref.cleanup()

    def __enter__(self) -> "TestDatabaseProvisioner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        source = self.config.source_path or SQLITE_MEMORY_TOKEN
        return f"<TestDatabaseProvisioner {self.config.source}={source}>"


__all__ = ["TestDatabaseProvisioner"]
