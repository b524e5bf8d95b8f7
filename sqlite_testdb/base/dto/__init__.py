"""DTO validation package for provisioner configuration."""

from .provisioner_config import (
    ConnectionOptions,
    ProvisionerConfig,
    SOURCE_DATABASE,
    SOURCE_MEMORY,
    SOURCE_SCHEMA,
)

__all__ = [
    "ConnectionOptions",
    "ProvisionerConfig",
    "SOURCE_DATABASE",
    "SOURCE_MEMORY",
    "SOURCE_SCHEMA",
]
