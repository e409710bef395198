"""Base adapter with shared functionality.

Provides the default adapt_many() so concrete adapters only implement
adapt_one(). Adapters are pure, stateless strategies supplied at projection
time.

Usage:
    class UserRowAdapter(Adapter[User, dict[str, Any]]):
        def adapt_one(self, source: User) -> dict[str, Any]:
            return {"user_id": source.id.value(), "display": source.name}

    user.to_object(UserRowAdapter())
    UserRowAdapter().adapt_many(users)
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

FromT = TypeVar("FromT")
ToT = TypeVar("ToT")


class Adapter(ABC, Generic[FromT, ToT]):
    """Transforms domain objects from one shape to another.

    Subclasses must implement:
        - adapt_one(source) -> ToT
    """

    @abstractmethod
    def adapt_one(self, source: FromT) -> ToT:
        """Transform a single item.

        Args:
            source: Item to adapt.

        Returns:
            Adapted item.
        """
        raise NotImplementedError("Subclass must implement adapt_one()")

    def adapt_many(self, sources: Iterable[FromT]) -> list[ToT]:
        """Transform items one by one, preserving order.

        Args:
            sources: Items to adapt.

        Returns:
            Adapted items in input order.
        """
        return [self.adapt_one(source) for source in sources]
