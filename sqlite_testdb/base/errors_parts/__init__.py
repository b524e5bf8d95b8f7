"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `sqlite_testdb.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError
from .configuration_error import ConfigurationError
from .copy_error import CopyError
from .schema_read_error import SchemaReadError
from .schema_execution_error import SchemaExecutionError
from .connection_error import DatabaseConnectionError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProvisioningError",
    "ConfigurationError",
    "CopyError",
    "SchemaReadError",
    "SchemaExecutionError",
    "DatabaseConnectionError",
    "classify_exception",
]
