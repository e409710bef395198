"""Value object base class.

Value objects have no identity: two instances of the same class with
structurally equal properties are equal.

Immutability:
    By convention, never mutate a value object after construction; build a
    new instance instead. _set() is inherited for construction-time
    normalization only.

Usage:
    from ddd_kernel.domain.value_objects import ValueObject

    class Address(ValueObject):
        @property
        def city(self) -> str:
            return self.get("city")

    Address({"city": "Lisbon"}) == Address({"city": "Lisbon"})  # True
"""

from typing import Any

from ddd_kernel.domain.property_container import PropertyContainer, structurally_equal


class ValueObject(PropertyContainer):
    """Base class for identity-less domain objects.

    Equality:
        Same concrete class and structurally equal props. equals() and
        deep_equals() are the same comparison.

    Hashing:
        From class and props; raises TypeError if a prop value is unhashable.
    """

    def equals(self, other: Any) -> bool:
        """Compare class and every property structurally."""
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return structurally_equal(self._props, other._props)

    def deep_equals(self, other: Any) -> bool:
        """Same as equals(); value objects are compared by value."""
        return self.equals(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self), frozenset(self._props.items())))
