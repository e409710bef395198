"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from ddd_kernel.core.enums import ErrorCode, Environment, IdentifierVersion
"""

from ddd_kernel.core.enums.environment import Environment
from ddd_kernel.core.enums.error_code import ErrorCode
from ddd_kernel.core.enums.identifier_version import IdentifierVersion

__all__ = ["ErrorCode", "Environment", "IdentifierVersion"]
