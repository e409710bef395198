"""Adapter protocols for overriding the default projection.

An adapter transforms domain objects into another shape (persistence row,
API schema, view model). Both operations are optional: ``to_object()`` only
uses an adapter that supports ``adapt_one``.

Implementations:
    - Adapter: ddd_kernel/domain/adapters/base_adapter.py (adapt_many derived)
    - PydanticModelAdapter: ddd_kernel/domain/adapters/pydantic_adapter.py

Usage:
    >>> class UserSummary:
    ...     def adapt_one(self, user: User) -> dict[str, str]:
    ...         return {"user": user.id.value()}
    >>> isinstance(UserSummary(), SupportsAdaptOne)
    True
    >>> user.to_object(UserSummary())
    {'user': '...'}
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

FromT = TypeVar("FromT", contravariant=True)
ToT = TypeVar("ToT", covariant=True)


@runtime_checkable
class SupportsAdaptOne(Protocol[FromT, ToT]):
    """Adapter able to transform a single item."""

    def adapt_one(self, source: FromT) -> ToT: ...


@runtime_checkable
class SupportsAdaptMany(Protocol[FromT, ToT]):
    """Adapter able to transform a sequence of items, preserving order."""

    def adapt_many(self, sources: Sequence[FromT]) -> list[ToT]: ...
