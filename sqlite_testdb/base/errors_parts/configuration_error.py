"""Invalid, missing or conflicting provisioner arguments."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError


@dataclass(eq=False)
class ConfigurationError(ProvisioningError):
    """Raised synchronously from construction; never retried."""

    code: ErrorCode = ErrorCode.CONFIGURATION


__all__ = ["ConfigurationError"]
