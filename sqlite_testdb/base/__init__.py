"""
sqlite_testdb base package

Exports the cross-cutting pieces shared by the provisioner and the
persistence helpers:

- Errors: the provisioning error taxonomy
- DTOs: validated configuration records
- Logging: structured JSON logging helpers
"""

from .dto import ConnectionOptions, ProvisionerConfig
from .errors import (
    ConfigurationError,
    CopyError,
    DatabaseConnectionError,
    ErrorCode,
    ProvisioningError,
    SchemaExecutionError,
    SchemaReadError,
    classify_exception,
)
from .logging import configure_logger, get_logger, log_event
from .log_support import JsonFormatter, LogContext

__all__ = [
    "ConnectionOptions",
    "ProvisionerConfig",
    "ConfigurationError",
    "CopyError",
    "DatabaseConnectionError",
    "ErrorCode",
    "ProvisioningError",
    "SchemaExecutionError",
    "SchemaReadError",
    "classify_exception",
    "configure_logger",
    "get_logger",
    "log_event",
    "JsonFormatter",
    "LogContext",
]
