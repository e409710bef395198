"""Programmer-contract violations.

Unlike DomainError (returned as data inside Failure), these are real
exceptions. They signal misuse of the kernel's API and are raised at the point
of misuse so they surface during development and testing instead of silently
corrupting state.

Error Types:
- ResultUnwrapError: Wrong-variant access on a Result
- IdentityProtectionError: Reading or writing ``id`` through the generic
  property accessors of an Entity/Aggregate
- ProjectionError: Base for projection engine failures
    - ProjectionCycleError: Self-referential object graph
    - ProjectionDepthError: Object graph nested deeper than the configured limit
- FrozenConstantError: Write attempt on a frozen constant
"""

from typing import Any


class ResultUnwrapError(RuntimeError):
    """Raised when a Result is unwrapped as the wrong variant.

    Attributes:
        error: The error stored in the Failure, if any.
    """

    def __init__(self, message: str, *, error: Any = None) -> None:
        """Initialize unwrap error.

        Args:
            message: Human-readable message.
            error: Stored Failure error (may be a non-exception DomainError).
        """
        super().__init__(message)
        self.error = error


class IdentityProtectionError(AttributeError):
    """Raised when ``id`` is accessed through the generic property accessors."""

    def __init__(self, operation: str, entity_type: str) -> None:
        """Initialize identity protection error.

        Args:
            operation: Attempted operation ("get" or "set").
            entity_type: Class name of the entity.
        """
        super().__init__(
            f"Cannot {operation} 'id' through the property accessors of "
            f"{entity_type}; use the read-only 'id' attribute"
        )
        self.operation = operation
        self.entity_type = entity_type


class ProjectionError(ValueError):
    """Base class for plain-object projection failures."""


class ProjectionCycleError(ProjectionError):
    """Raised when the object graph refers back to an object being projected."""

    def __init__(self, value_type: str) -> None:
        super().__init__(
            f"Cycle detected while projecting {value_type}: "
            "object graph refers back to itself"
        )
        self.value_type = value_type


class ProjectionDepthError(ProjectionError):
    """Raised when the object graph is nested deeper than allowed."""

    def __init__(self, max_depth: int, *, recursion_limit: int | None = None) -> None:
        """Initialize depth error.

        Args:
            max_depth: Configured projection depth limit.
            recursion_limit: Interpreter recursion limit, when that was hit
                before max_depth.
        """
        if recursion_limit is None:
            message = f"Object graph exceeds maximum projection depth of {max_depth}"
        else:
            message = (
                "Object graph is nested too deeply for the interpreter recursion "
                f"limit of {recursion_limit} (projection depth limit {max_depth})"
            )
        super().__init__(message)
        self.max_depth = max_depth
        self.recursion_limit = recursion_limit


class FrozenConstantError(TypeError):
    """Raised on any write or delete attempt against a frozen constant."""
