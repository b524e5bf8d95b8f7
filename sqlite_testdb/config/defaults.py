"""sqlite_testdb.config.defaults
============================

Central place for small, stable default values used across the sqlite_testdb
package. These defaults can be overridden via environment variables (see
``sqlite_testdb.config.env``) or explicit overrides passed to
``sqlite_testdb.config.get_settings``.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep the provisioner and persistence helpers free of magic literals.

This module intentionally avoids importing from other sqlite_testdb packages
to prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- SQLite locators ----

# Token understood by sqlite3 as "no backing file".
SQLITE_MEMORY_TOKEN = ":memory:"
# URI prefix; connection strings are SQLite URIs opened with ``uri=True``.
SQLITE_URI_SCHEME = "file:"


# ---- Schema files ----
SCHEMA_COMMENT_MARKER = "--"
SCHEMA_STATEMENT_TERMINATOR = ";"
SCHEMA_ENCODING = "utf-8"


# ---- Ephemeral files ----
EPHEMERAL_PREFIX = "sqlite-testdb-"
EPHEMERAL_SUFFIX = ".db"
# Files SQLite may leave next to a database; removed together with it.
SQLITE_SIDECAR_SUFFIXES = ("-journal", "-wal", "-shm")


# ---- Connection options ----
DEFAULT_RAISE_ON_ERROR = True
DEFAULT_AUTO_COMMIT = True
# Seconds sqlite3 waits on a locked database before raising.
DEFAULT_CONNECT_TIMEOUT_S = 5.0
# Isolation level used when auto-commit is disabled.
MANUAL_COMMIT_ISOLATION_LEVEL = "DEFERRED"


# ---- Logging ----
# Quiet by default so provisioning does not clutter test output.
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_JSON = True
