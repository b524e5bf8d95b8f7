"""Unified provisioning error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``sqlite_testdb.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provisioning_error import ProvisioningError
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.copy_error import CopyError
from .errors_parts.schema_read_error import SchemaReadError
from .errors_parts.schema_execution_error import SchemaExecutionError
from .errors_parts.connection_error import DatabaseConnectionError
from .errors_parts.classification import classify_exception

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
