"""sqlite_testdb.config.env
=======================

Centralized environment variable mapping and helpers for provisioner settings.

Purpose
-------
- Provide a single source of truth for mapping setting names to their
  environment variable names.
- Offer small utilities to read and coerce those variables consistently.

Failure Modes
-------------
- Helpers return ``None`` when a setting is unknown or its variable is unset
  or blank. Callers decide how to fall back (normally to
  ``sqlite_testdb.config.defaults``).
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_PREFIX = "SQLITE_TESTDB_"

# Setting name -> environment variable
ENV_MAP: Dict[str, str] = {
    "tmp_dir": f"{ENV_PREFIX}TMPDIR",
    "suffix": f"{ENV_PREFIX}SUFFIX",
    "log_level": f"{ENV_PREFIX}LOG_LEVEL",
    "log_json": f"{ENV_PREFIX}LOG_JSON",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def get_env_var_name(setting: str) -> Optional[str]:
    """Return the environment variable name for ``setting`` (or ``None``)."""
    return ENV_MAP.get(setting.lower()) if setting else None


def read_setting(setting: str) -> Optional[str]:
    """Return the stripped value of the variable backing ``setting``.

    Blank values are treated as unset.
    """
    name = get_env_var_name(setting)
    if not name:
        return None
    val = os.environ.get(name)
    if val is None or not val.strip():
        return None
    return val.strip()


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish environment string.

    Returns
    -------
    Optional[bool]
        ``True``/``False`` for recognised spellings, ``None`` otherwise.
    """
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return None


def env_overrides() -> Dict[str, object]:
    """Collect every setting present in the environment, coerced to its type."""
    out: Dict[str, object] = {}
    for setting in ENV_MAP:
        raw = read_setting(setting)
        if raw is None:
            continue
        if setting == "log_json":
            parsed = parse_bool(raw)
            if parsed is not None:
                out[setting] = parsed
            continue
        out[setting] = raw
    return out


__all__ = [
    "ENV_PREFIX",
    "ENV_MAP",
    "get_env_var_name",
    "read_setting",
    "parse_bool",
    "env_overrides",
]
