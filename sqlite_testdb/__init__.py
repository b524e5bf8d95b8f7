"""sqlite_testdb package

Disposable SQLite databases for test suites.

Purpose:
    Create a temporary SQLite database from an existing database file, a SQL
    schema file, or in memory, hand out its connection string and a live
    connection, and delete it when the test is done. Packaging is configured
    via the repository root ``pyproject.toml``.

Public API (re-exported):
    - Version: ``__version__``
    - Provisioner: :class:`TestDatabaseProvisioner`
    - Configuration: :class:`ConnectionOptions`, :class:`ProvisionerConfig`
    - Exceptions: :class:`ProvisioningError` and its subclasses,
      :class:`ErrorCode`
    - Logging: :func:`configure_logger`

Notes:
    - pytest fixtures live in ``sqlite_testdb.pytest_plugin`` and are
      registered automatically through the ``pytest11`` entry point.
"""

from .base.dto import ConnectionOptions, ProvisionerConfig
from .base.errors import (
    ConfigurationError,
    CopyError,
    DatabaseConnectionError,
    ErrorCode,
    ProvisioningError,
    SchemaExecutionError,
    SchemaReadError,
)
from .base.logging import configure_logger
from .provisioner import TestDatabaseProvisioner

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "TestDatabaseProvisioner",
    "ConnectionOptions",
    "ProvisionerConfig",
    # Exceptions
    "ProvisioningError",
    "ConfigurationError",
    "CopyError",
    "SchemaReadError",
    "SchemaExecutionError",
    "DatabaseConnectionError",
    "ErrorCode",
    # Logging
    "configure_logger",
]
