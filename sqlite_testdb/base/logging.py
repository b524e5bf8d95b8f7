"""Base structured logging utilities for the provisioner.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across the persistence helpers.

Every module obtains a child logger through ``get_logger(__name__)``; child
loggers carry no handlers of their own and propagate to the shared
``sqlite_testdb`` logger, which owns a single stderr handler. The level is
taken from ``SQLITE_TESTDB_LOG_LEVEL`` (default WARNING, so provisioning stays
silent inside test runs unless asked).
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config import get_settings
from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "sqlite_testdb"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_sqlite_testdb_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_sqlite_testdb_console_handler"
_FILE_HANDLER_ATTR = "_sqlite_testdb_file_handler"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool) -> logging.Logger:
    """Initialize and return the shared ``sqlite_testdb`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    settings = get_settings()
    desired_level = _parse_level(settings.get("log_level"))
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # pytest's capsys swaps and closes sys.stderr between tests
                logger.removeHandler(existing)
                replacement = logging.StreamHandler(sys.stderr)
                replacement.setLevel(desired_level)
                replacement.setFormatter(_make_formatter(json_mode))
                setattr(replacement, _CONSOLE_HANDLER_ATTR, True)
                logger.addHandler(replacement)
                continue
            existing.setLevel(desired_level)
            if hasattr(existing, "setStream"):
                existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: Optional[bool] = None) -> logging.Logger:
    if json_mode is None:
        json_mode = bool(get_settings().get("log_json"))
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``sqlite_testdb`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused if one already points there). When ``None``, any
        file handler previously attached by this function is removed.
    json_mode: bool
        Whether added/updated file handlers use the JSON formatter.

    Returns
    -------
    logging.Logger
        The configured base logger.

    Notes
    -----
    Handlers that were not attached by this module are left untouched.
    """
    logger = get_logger(BASE_LOGGER_NAME)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed_handlers = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed_handlers:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed_handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event.

    Summary
    -------
    Serializes ``{"event": event, **ctx, **fields}`` as one JSON line. Keys
    whose value is ``None`` are dropped unless ``keep_none`` is set. Values
    that are not JSON-native (``Path``, enums) are rendered with ``str``.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally a child obtained via ``get_logger``).
    event: str
        Event name (e.g. ``provision.materialize.done``).
    ctx: LogContext | None
        Provisioning context; merged shallowly.
    level: int
        Logging level for the record.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``.
    **fields: Any
        Arbitrary key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
