"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Used to attach an ``error_code`` to structured log events regardless of
whether the failure came from the filesystem, the sqlite3 engine or this
package. sqlite3 reports most failures as ``OperationalError`` whatever the
cause, so engine errors fall back to message heuristics.
"""
from __future__ import annotations

import sqlite3
from typing import Optional, Tuple, Type

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError


_OS_ERROR_MAP: Tuple[Tuple[Type[OSError], ErrorCode], ...] = (
    (FileNotFoundError, ErrorCode.NOT_FOUND),
    (IsADirectoryError, ErrorCode.CONFLICT),
    (FileExistsError, ErrorCode.CONFLICT),
    (PermissionError, ErrorCode.PERMISSION),
)


def _classify_os_error(exc: OSError) -> ErrorCode:
    for kind, code in _OS_ERROR_MAP:
        if isinstance(exc, kind):
            return code
    return ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for sqlite3 engine messages."""
    PATTERN_GROUPS = (
        (ErrorCode.CONNECTION, ("unable to open",)),
        (ErrorCode.CONNECTION, ("not a database",)),
        (ErrorCode.PERMISSION, ("readonly",)),
        (ErrorCode.PERMISSION, ("read-only",)),
        (ErrorCode.CONFLICT, ("already exists",)),
        (ErrorCode.CONFLICT, ("locked",)),
        (ErrorCode.NOT_FOUND, ("no such",)),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProvisioningError passthrough.
        2. OSError subclasses (not found, permission, ...).
        3. sqlite3 errors: message heuristics, else ``SCHEMA_EXECUTION``.
        4. Unicode decoding problems (schema read).
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProvisioningError):
        return exc.code
    if isinstance(exc, OSError):
        return _classify_os_error(exc)
    if isinstance(exc, sqlite3.Error):
        code = _heuristic_from_message(str(exc).lower())
        return code if code is not None else ErrorCode.SCHEMA_EXECUTION
    if isinstance(exc, UnicodeDecodeError):
        return ErrorCode.SCHEMA_READ
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
]
