"""Unified settings layer for sqlite_testdb.

Goals
-----
* Centralize defaults (temp directory, file suffix, log level).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Environment variables (``SQLITE_TESTDB_*``)
    3. In-code overrides passed to the helper
* Provide a single call site: ``get_settings(overrides=None)``.

Environment Variable Conventions
--------------------------------
SQLITE_TESTDB_TMPDIR, SQLITE_TESTDB_SUFFIX, SQLITE_TESTDB_LOG_LEVEL,
SQLITE_TESTDB_LOG_JSON. See ``sqlite_testdb.config.env``.

Public API
----------
* get_settings(overrides: dict | None = None) -> dict
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .defaults import (
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    EPHEMERAL_PREFIX,
    EPHEMERAL_SUFFIX,
)
from .env import env_overrides


DEFAULTS: Dict[str, Any] = {
    # None lets ``tempfile`` choose (honours TMPDIR et al.)
    "tmp_dir": None,
    "prefix": EPHEMERAL_PREFIX,
    "suffix": EPHEMERAL_SUFFIX,
    "log_level": DEFAULT_LOG_LEVEL,
    "log_json": DEFAULT_LOG_JSON,
}


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged provisioner settings.

    Merge order (later wins): defaults -> env vars -> overrides. Override
    values of ``None`` are ignored so callers can pass optional arguments
    straight through.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = [
    "get_settings",
    "DEFAULTS",
]
