"""
Structured provisioning error exception type.

Base class for every error raised by sqlite_testdb. Wraps filesystem and
engine exceptions with a normalized `ErrorCode` for consistent handling and
structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ProvisioningError(Exception):
    """Represents a structured provisioning error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        path: Filesystem path involved in the failure, when there is one.
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    path: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        """Return the message, suffixed with the original error text if any."""
        if self.raw is not None:
            return f"{self.message}: {self.raw}"
        return self.message


__all__ = ["ProvisioningError"]
