"""Failure opening a connection handle to a provisioned database.

Named ``DatabaseConnectionError`` so it does not shadow the builtin
``ConnectionError``.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError


@dataclass(eq=False)
class DatabaseConnectionError(ProvisioningError):
    code: ErrorCode = ErrorCode.CONNECTION


__all__ = ["DatabaseConnectionError"]
