"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from sqlite_testdb import TestDatabaseProvisioner
from sqlite_testdb.base.logging import (
    BASE_LOGGER_NAME,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
)
from sqlite_testdb.base.log_support import JsonFormatter


@pytest.fixture()
def base_stream(monkeypatch: pytest.MonkeyPatch):
    """Route the shared logger into a StringIO and restore it afterwards."""
    monkeypatch.delenv("SQLITE_TESTDB_LOG_LEVEL", raising=False)
    base_logger = get_logger(BASE_LOGGER_NAME)
    saved_handlers = list(base_logger.handlers)
    saved_level = base_logger.level
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    base_logger.handlers[:] = [handler]
    yield base_logger, stream
    base_logger.handlers[:] = saved_handlers
    base_logger.setLevel(saved_level)


def _events(stream: io.StringIO) -> list:
    return [json.loads(ln) for ln in stream.getvalue().splitlines() if ln]


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("SQLITE_TESTDB_LOG_LEVEL", "ERROR")
    logger = get_logger(name="sqlite_testdb.test", json_mode=True)
    logger.warning("hello")
    out = capsys.readouterr().err
    assert out == ""  # nosec B101 - asserts are appropriate in unit tests
    logger.error("fail")
    out = capsys.readouterr().err
    data = json.loads(out.strip())
    assert data["level"] == "ERROR"  # nosec B101 - asserts are appropriate in unit tests
    assert data["msg"] == "fail"  # nosec B101 - asserts are appropriate in unit tests


def test_get_logger_switches_console_formatter(monkeypatch, capsys):
    monkeypatch.setenv("SQLITE_TESTDB_LOG_LEVEL", "ERROR")
    logger = get_logger(name="sqlite_testdb.test.fmt", json_mode=False)
    logger.error("plain")
    out = capsys.readouterr().err
    assert "ERROR sqlite_testdb.test.fmt plain" in out  # nosec B101 - asserts are appropriate in unit tests

    monkeypatch.setenv("SQLITE_TESTDB_LOG_JSON", "true")
    logger = get_logger(name="sqlite_testdb.test.fmt")
    logger.error("structured")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["msg"] == "structured"  # nosec B101 - asserts are appropriate in unit tests


def test_default_level_is_quiet(monkeypatch):
    monkeypatch.delenv("SQLITE_TESTDB_LOG_LEVEL", raising=False)
    assert get_logger().level == logging.WARNING  # nosec B101 - asserts are appropriate in unit tests


def test_log_event_merges_context_and_drops_none(base_stream):
    base_logger, stream = base_stream
    child = get_logger("sqlite_testdb.test.events")
    base_logger.setLevel(logging.INFO)
    ctx = LogContext(source="schema", source_path="/x/schema.sql", extra={"run": 1, "skip": None})
    log_event(child, "schema.loaded", ctx, statements=2, target=None)
    (payload,) = _events(stream)
    assert payload["event"] == "schema.loaded"  # nosec B101 - asserts are fine in tests
    assert payload["source"] == "schema"  # nosec B101 - asserts are fine in tests
    assert payload["run"] == 1  # nosec B101 - asserts are fine in tests
    assert payload["statements"] == 2  # nosec B101 - asserts are fine in tests
    assert "skip" not in payload and "target" not in payload  # nosec B101 - asserts are fine in tests
    assert "msg" not in payload  # nosec B101 - hoisted, not double encoded


def test_log_event_keep_none_and_non_json_values(base_stream):
    base_logger, stream = base_stream
    base_logger.setLevel(logging.DEBUG)
    log_event(base_logger, "copy.failed", keep_none=True, target=None, source_path=Path("/a/b.db"), level=logging.DEBUG)
    (payload,) = _events(stream)
    assert payload["target"] is None  # nosec B101 - asserts are fine in tests
    assert payload["source_path"] == str(Path("/a/b.db"))  # nosec B101 - asserts are fine in tests


def test_log_event_respects_level(base_stream):
    base_logger, stream = base_stream
    base_logger.setLevel(logging.WARNING)
    log_event(base_logger, "provision.validated", level=logging.DEBUG)
    assert stream.getvalue() == ""  # nosec B101 - suppressed below threshold


def test_provisioner_emits_materialize_events(base_stream, source_db):
    base_logger, stream = base_stream
    base_logger.setLevel(logging.DEBUG)
    db = TestDatabaseProvisioner(database=source_db)
    db.database_ref
    events = [p["event"] for p in _events(stream)]
    assert events[:3] == [  # nosec B101 - asserts are fine in tests
        "provision.validated",
        "provision.materialize.start",
        "provision.materialize.done",
    ]
    db.cleanup()
    assert _events(stream)[-1]["event"] == "ephemeral.removed"  # nosec B101 - asserts are fine in tests


def test_json_formatter_keeps_plain_messages() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="sqlite_testdb.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg="plain %s",
        args=("text",),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["msg"] == "plain text"  # nosec B101 - validates plain path
    assert payload["logger"] == "sqlite_testdb.test.json"  # nosec B101


def test_configure_logger_manages_file_handler(tmp_path, base_stream):
    log_file = tmp_path / "logs" / "testdb.log"
    logger = configure_logger(level="INFO", file_path=str(log_file))
    logger.info(json.dumps({"event": "file.check"}))
    managed = [h for h in logger.handlers if getattr(h, "_sqlite_testdb_file_handler", False)]
    assert len(managed) == 1  # nosec B101
    managed[0].flush()
    assert json.loads(log_file.read_text().splitlines()[0])["event"] == "file.check"  # nosec B101

    configure_logger(file_path=None)
    assert not any(getattr(h, "_sqlite_testdb_file_handler", False) for h in logger.handlers)  # nosec B101
