"""
Normalized provisioning error codes (taxonomy).

Defines the `ErrorCode` enumeration used across the provisioner, persistence
helpers and log payloads. Values are lowercase snake_case and are considered a
stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    COPY = "copy"
    SCHEMA_READ = "schema_read"
    SCHEMA_EXECUTION = "schema_execution"
    CONNECTION = "connection"
    PERMISSION = "permission"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
