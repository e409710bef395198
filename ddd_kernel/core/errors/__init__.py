"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from ddd_kernel.core.errors import DomainError, ValidationError
    from ddd_kernel.core.errors import IdentityProtectionError, ResultUnwrapError
"""

from ddd_kernel.core.errors.common_errors import SerializationError, ValidationError
from ddd_kernel.core.errors.contract_errors import (
    FrozenConstantError,
    IdentityProtectionError,
    ProjectionCycleError,
    ProjectionDepthError,
    ProjectionError,
    ResultUnwrapError,
)
from ddd_kernel.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "SerializationError",
    "ResultUnwrapError",
    "IdentityProtectionError",
    "ProjectionError",
    "ProjectionCycleError",
    "ProjectionDepthError",
    "FrozenConstantError",
]
