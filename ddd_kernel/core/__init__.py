"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes (DomainError data + contract exceptions)
- Frozen constant helper

The core module has NO dependencies on other ddd_kernel layers.
Configuration (``core.config``) and the composition root (``core.container``)
are imported explicitly, not re-exported here.
"""

from ddd_kernel.core.enums import ErrorCode
from ddd_kernel.core.errors import (
    DomainError,
    FrozenConstantError,
    IdentityProtectionError,
    ProjectionCycleError,
    ProjectionDepthError,
    ProjectionError,
    ResultUnwrapError,
    SerializationError,
    ValidationError,
)
from ddd_kernel.core.frozen_constant import FrozenConstant, create_constant
from ddd_kernel.core.result import Failure, Result, Success, combine

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "FrozenConstant",
    "FrozenConstantError",
    "IdentityProtectionError",
    "ProjectionCycleError",
    "ProjectionDepthError",
    "ProjectionError",
    "Result",
    "ResultUnwrapError",
    "SerializationError",
    "Success",
    "ValidationError",
    "combine",
    "create_constant",
]
