"""Line-oriented schema file loader.

Purpose
-------
Build a fresh database from a plain SQL text file by splitting it into
statements and executing them one at a time on a bootstrap connection.

Splitting rules
---------------
- Lines that are blank, or whose first non-whitespace characters are ``--``,
  are dropped and never reach the engine.
- Every other line is appended to a buffer.
- As soon as a line contains ``;`` anywhere, the buffer is executed as one
  statement and reset.
- Text left in the buffer after the last line is not executed.

Known limitations
-----------------
This is a heuristic, not a SQL tokenizer. A ``;`` inside a string literal or
a trigger body ends the statement early, so ``CREATE TRIGGER ... BEGIN ...;
END;`` written across lines fails with ``SchemaExecutionError``. Two
statements on one line are sent as one buffer, which ``sqlite3`` refuses.
Schemas that need either should be loaded with ``executescript`` by the
caller instead.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from typing import Iterable, Iterator, List, Optional, Union

from ...base.errors import SchemaExecutionError, SchemaReadError, classify_exception
from ...base.logging import get_logger, log_event
from ...config.defaults import (
    SCHEMA_COMMENT_MARKER,
    SCHEMA_ENCODING,
    SCHEMA_STATEMENT_TERMINATOR,
)

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def is_skippable(line: str) -> bool:
    """Return True for blank lines and ``--`` comment lines."""
    stripped = line.lstrip()
    return not stripped or stripped.startswith(SCHEMA_COMMENT_MARKER)


class StatementSplitter:
    """Accumulate schema lines and hand back complete statements.

    Feed lines in file order with :meth:`feed`; it returns the buffered
    statement when the fed line carries a terminator and ``None`` otherwise.
    Whatever has not been terminated yet is available as :attr:`pending`.
    """

    def __init__(self) -> None:
        self._buffer: List[str] = []

    @property
    def pending(self) -> str:
        return "".join(self._buffer)

    def feed(self, line: str) -> Optional[str]:
        if is_skippable(line):
            return None
        self._buffer.append(line)
        if SCHEMA_STATEMENT_TERMINATOR not in line:
            return None
        statement = self.pending
        self._buffer.clear()
        return statement


def iter_statements(lines: Iterable[str]) -> Iterator[str]:
    """Yield the statements found in ``lines``; an unterminated tail is dropped."""
    splitter = StatementSplitter()
    for line in lines:
        statement = splitter.feed(line)
        if statement is not None:
            yield statement


def _execute(conn: sqlite3.Connection, statement: str, schema_path: str) -> None:
    log_event(logger, "schema.statement", source_path=schema_path, sql=statement, level=logging.DEBUG)
    try:
        conn.execute(statement)
    except sqlite3.Error as exc:
        log_event(
            logger,
            "schema.failed",
            source_path=schema_path,
            sql=statement,
            error_code=classify_exception(exc),
            level=logging.ERROR,
        )
        raise SchemaExecutionError(
            f"Error executing SQL for {schema_path}",
            path=schema_path,
            raw=exc,
            statement=statement,
        ) from exc


def load_schema(conn: sqlite3.Connection, schema_path: PathLike) -> int:
    """Execute every statement of a schema file on ``conn``.

    The caller owns the connection and its transaction; this function neither
    commits nor closes.

    Parameters
    ----------
    conn:
        Open connection to the database being built.
    schema_path:
        UTF-8 schema file.

    Returns
    -------
    int
        Number of statements executed.

    Raises
    ------
    SchemaReadError
        If the file cannot be opened or is not valid UTF-8.
    SchemaExecutionError
        On the first statement the engine rejects.
    """
    path = os.fspath(schema_path)
    try:
        fh = open(path, "r", encoding=SCHEMA_ENCODING)
    except OSError as exc:
        raise SchemaReadError(f"Can't read {path}", path=path, raw=exc) from exc

    executed = 0
    splitter = StatementSplitter()
    with fh:
        try:
            for line in fh:
                statement = splitter.feed(line)
                if statement is None:
                    continue
                _execute(conn, statement, path)
                executed += 1
        except UnicodeDecodeError as exc:
            raise SchemaReadError(f"Can't decode {path}", path=path, raw=exc) from exc

    if splitter.pending.strip():
        log_event(
            logger,
            "schema.trailing_sql",
            source_path=path,
            sql=splitter.pending,
            level=logging.DEBUG,
        )
    return executed


__all__ = [
    "is_skippable",
    "StatementSplitter",
    "iter_statements",
    "load_schema",
]
