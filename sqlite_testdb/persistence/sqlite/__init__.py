from __future__ import annotations

from .copier import copy_database
from .engine import bootstrap_session, create_connection, format_dsn, is_memory
from .ephemeral import EphemeralDatabaseFile
from .schema_loader import StatementSplitter, iter_statements, load_schema

__all__ = [
    "copy_database",
    "bootstrap_session",
    "create_connection",
    "format_dsn",
    "is_memory",
    "EphemeralDatabaseFile",
    "StatementSplitter",
    "iter_statements",
    "load_schema",
]
