"""Common error classes used across the kernel.

Error Types:
- ValidationError: Input validation failures (e.g. malformed identifier)
- SerializationError: Projection could not be rendered to the target format

Usage:
    from ddd_kernel.core.errors import ValidationError
    from ddd_kernel.core.enums import ErrorCode
    from ddd_kernel.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_IDENTIFIER,
        message="Identifier must be a string",
        field="id",
    ))
"""

from dataclasses import dataclass

from ddd_kernel.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SerializationError(DomainError):
    """Rendering a projected object graph failed.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        value_type: Type name of the value that could not be rendered.
        details: Additional context.
    """

    value_type: str | None = None
