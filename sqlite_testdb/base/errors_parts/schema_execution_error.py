"""
Failure executing a statement read from a schema file.

Carries the statement text exactly as it was sent to the engine so test
authors can locate the offending lines in their schema.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError


@dataclass(eq=False)
class SchemaExecutionError(ProvisioningError):
    """Structured schema execution failure.

    Attributes:
        statement: The buffered SQL that the engine rejected.
    """

    code: ErrorCode = ErrorCode.SCHEMA_EXECUTION
    statement: Optional[str] = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.statement is None:
            return base
        return f"{base}\nStatement:\n{self.statement.rstrip()}"


__all__ = ["SchemaExecutionError"]
