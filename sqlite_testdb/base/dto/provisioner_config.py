"""
Pydantic DTOs and validators for provisioner construction.

Purpose
-------
This module defines the frozen configuration record handed to
``TestDatabaseProvisioner``. All construction-time rules live here so the
provisioner never holds a half-valid configuration:

- at most one of ``database``, ``schema_file`` and ``memory`` is set,
- at least one of them is set,
- a given ``database`` or ``schema_file`` path is non-empty and names an
  existing regular file,
- connection options are known names with the right types.

External dependencies: Pydantic only. No file I/O beyond ``Path.exists`` and
``Path.is_file``.

Fallback semantics: Not applicable. Validation either succeeds or raises a
``pydantic.ValidationError``; the provisioner translates that into
``ConfigurationError`` at its edge.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from ...config.defaults import (
    DEFAULT_AUTO_COMMIT,
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_RAISE_ON_ERROR,
)


SOURCE_DATABASE = "database"
SOURCE_SCHEMA = "schema"
SOURCE_MEMORY = "memory"

MUTUALLY_EXCLUSIVE_MESSAGE = "The schema, database and memory arguments may not be used together."
MISSING_SOURCE_MESSAGE = "One of the schema, database or memory arguments is required."


class ConnectionOptions(BaseModel):
    """Named behaviour toggles for connections opened on a test database.

    Attributes:
        raise_on_error: Raise ``DatabaseConnectionError`` when the handle
            cannot be opened. When false the failure is logged and the handle
            is ``None``. Also accepted as ``RaiseError``.
        auto_commit: Open the handle in autocommit mode
            (``isolation_level=None``). Also accepted as ``AutoCommit``.
        timeout: Seconds to wait on a locked database.
        detect_types: ``sqlite3.PARSE_*`` flags.
        check_same_thread: Forwarded to ``sqlite3.connect``.

    Unknown option names are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    raise_on_error: bool = Field(
        default=DEFAULT_RAISE_ON_ERROR,
        validation_alias=AliasChoices("raise_on_error", "RaiseError"),
    )
    auto_commit: bool = Field(
        default=DEFAULT_AUTO_COMMIT,
        validation_alias=AliasChoices("auto_commit", "AutoCommit"),
    )
    timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT_S, ge=0.0)
    detect_types: int = Field(default=0, ge=0)
    check_same_thread: bool = True

    def connect_kwargs(self) -> Dict[str, Any]:
        """Return the keyword arguments ``sqlite3.connect`` understands."""
        return {
            "timeout": self.timeout,
            "detect_types": self.detect_types,
            "check_same_thread": self.check_same_thread,
        }


class ProvisionerConfig(BaseModel):
    """Validated, immutable provisioner configuration.

    Attributes:
        database: Existing database file to copy.
        schema_file: SQL schema file used to build a fresh database.
        memory: Use an in-memory database.
        db_attrs: Connection options for the handle.

    Rules:
        Exactly one of ``database``, ``schema_file`` and ``memory`` must be
        set. ``memory=False`` counts as not set.

    Failure Modes:
        Raises ``ValidationError`` when constraints are not met.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database: Optional[Path] = None
    schema_file: Optional[Path] = None
    memory: bool = False
    db_attrs: ConnectionOptions = Field(default_factory=ConnectionOptions)

    @field_validator("database", "schema_file", mode="before")
    @classmethod
    def _reject_blank_path(cls, v: Any) -> Any:
        # Path("") is the current directory, which always exists
        if isinstance(v, str) and not v.strip():
            raise ValueError("path must not be empty")
        return v

    @model_validator(mode="after")
    def _validate_source(self) -> "ProvisionerConfig":
        """Enforce the one-source rule, then check that given paths exist.

        Raises:
            ValueError: On conflicting, missing or nonexistent sources.
        """
        chosen = [
            name
            for name, is_set in (
                (SOURCE_DATABASE, self.database is not None),
                (SOURCE_SCHEMA, self.schema_file is not None),
                (SOURCE_MEMORY, self.memory),
            )
            if is_set
        ]
        if len(chosen) > 1:
            raise ValueError(MUTUALLY_EXCLUSIVE_MESSAGE)
        if not chosen:
            raise ValueError(MISSING_SOURCE_MESSAGE)
        if self.database is not None and not self.database.exists():
            raise ValueError(f"database does not exist: {self.database}")
        if self.database is not None and not self.database.is_file():
            raise ValueError(f"database is not a file: {self.database}")
        if self.schema_file is not None and not self.schema_file.exists():
            raise ValueError(f"schema does not exist: {self.schema_file}")
        if self.schema_file is not None and not self.schema_file.is_file():
            raise ValueError(f"schema is not a file: {self.schema_file}")
        return self

    @property
    def source(self) -> str:
        """Name of the configured source kind."""
        if self.database is not None:
            return SOURCE_DATABASE
        if self.schema_file is not None:
            return SOURCE_SCHEMA
        return SOURCE_MEMORY

    @property
    def source_path(self) -> Optional[Path]:
        return self.database if self.database is not None else self.schema_file


__all__ = [
    "ConnectionOptions",
    "ProvisionerConfig",
    "SOURCE_DATABASE",
    "SOURCE_SCHEMA",
    "SOURCE_MEMORY",
    "MUTUALLY_EXCLUSIVE_MESSAGE",
    "MISSING_SOURCE_MESSAGE",
]
