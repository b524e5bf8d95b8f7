"""Failure copying a source database into its ephemeral file."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provisioning_error import ProvisioningError


@dataclass(eq=False)
class CopyError(ProvisioningError):
    """Source unreadable or destination unwritable."""

    code: ErrorCode = ErrorCode.COPY


__all__ = ["CopyError"]
