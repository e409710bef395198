"""Immutable Identifier value object.

Identity token for entities and aggregates. An identifier is either
"existing" (supplied by the caller, e.g. loaded from persistence) or "new"
(generated here, not yet persisted).

Generation:
    New identifiers are canonical 36-character UUID strings produced by an
    injectable generator. The default is time-ordered UUIDv7; the container's
    get_identifier_generator() honours Settings.identifier_version.

Usage:
    from ddd_kernel.domain.identifier import Identifier

    existing = Identifier.create("user-42").unwrap()
    existing.is_new()   # False

    fresh = Identifier.create().unwrap()
    fresh.is_new()      # True
    len(fresh.value())  # 36
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Self
from uuid import uuid4

from uuid_extensions import uuid7str

from ddd_kernel.core.enums import ErrorCode
from ddd_kernel.core.errors import ValidationError
from ddd_kernel.core.result import Failure, Result, Success
from ddd_kernel.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)


def generate_uuid7() -> str:
    """Generate a time-ordered UUIDv7 string (default generator)."""
    return uuid7str()


def generate_uuid4() -> str:
    """Generate a random UUIDv4 string."""
    return str(uuid4())


@total_ordering
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Identifier:
    """Immutable, comparable identity token.

    Build with Identifier.create(); the constructor is an implementation
    detail.

    Equality:
        Two identifiers are equal iff their string values are equal. The
        new/existing flag does not participate in equality or hashing.

    Ordering:
        Identifiers order by value, so UUIDv7 identifiers sort by creation
        time.

    Attributes:
        _value: The identity string.
        _is_new: True if generated rather than supplied.
    """

    _value: str
    _is_new: bool = field(default=False)

    @classmethod
    def create(
        cls,
        raw: Any = None,
        *,
        generator: IdentifierGeneratorProtocol | None = None,
    ) -> Result[Self, ValidationError]:
        """Create an identifier from a raw value, or generate a new one.

        Args:
            raw: Existing identity string. None or "" generates a new one.
            generator: Source of new identity strings (default: UUIDv7).

        Returns:
            Success(Identifier) for a string or omitted value.
            Failure(ValidationError) if raw is not a string.

        Example:
            >>> Identifier.create("abc").unwrap().value()
            'abc'
            >>> Identifier.create(42).is_err()
            True
        """
        if raw is None or raw == "":
            new_value = (generator or generate_uuid7)()
            return Success(value=cls(new_value, True))

        if not isinstance(raw, str):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_IDENTIFIER,
                    message=f"Identifier must be a string, got {type(raw).__name__}",
                    field="id",
                )
            )

        return Success(value=cls(raw, False))

    def value(self) -> str:
        """Return the identity string."""
        return self._value

    def is_new(self) -> bool:
        """Check whether this identifier was generated (not yet persisted).

        Returns:
            True if generated by create(), False if supplied.
        """
        return self._is_new

    def equals(self, other: Any) -> bool:
        """Compare by identity string; False for anything but an Identifier."""
        if not isinstance(other, Identifier):
            return False
        return self._value == other.value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "Identifier") -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._value < other.value()

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Identifier({self._value!r}, is_new={self._is_new})"
