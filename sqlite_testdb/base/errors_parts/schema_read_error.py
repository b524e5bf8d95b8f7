"""Failure opening or decoding a schema file."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError


@dataclass(eq=False)
class SchemaReadError(ProvisioningError):
    code: ErrorCode = ErrorCode.SCHEMA_READ


__all__ = ["SchemaReadError"]
