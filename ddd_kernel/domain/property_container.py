"""Property container base for entities, aggregates and value objects.

Holds a named-property bag with controlled access:
- get(key): public read
- _set(key, value): protected write, for subclass behavior methods only
- props: read-only view of the whole bag

Each container owns its props dict exclusively (the mapping passed to the
constructor is copied). Nested values are NOT copied: mutable nested objects
are shared by reference, including between an object and its clone().

Cloning:
    clone() goes through the from_props() factory hook. Subclasses whose
    constructor does not take a single props mapping override from_props().
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Self

from ddd_kernel.domain.protocols.adapter_protocol import SupportsAdaptOne
from ddd_kernel.domain.serialization import PlainObject, serialize_props

_MISSING: Any = object()


def structurally_equal(left: Any, right: Any) -> bool:
    """Deep structural comparison used by deep_equals().

    Domain objects compare through their own deep_equals(); mappings and
    sequences compare element-wise; everything else uses ==.
    """
    if left is right:
        return True

    if isinstance(left, PropertyContainer) and isinstance(right, PropertyContainer):
        return left.deep_equals(right)

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(structurally_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if type(left) is not type(right) or len(left) != len(right):
            return False
        return all(structurally_equal(a, b) for a, b in zip(left, right))

    return bool(left == right)


class PropertyContainer:
    """Generic holder of a named-property bag.

    Attributes:
        _props: Owned property dict.
    """

    def __init__(self, props: Mapping[str, Any]) -> None:
        """Initialize with a copy of props.

        Args:
            props: Initial properties.
        """
        self._props: dict[str, Any] = dict(props)

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> Self:
        """Build a sibling instance from props (used by clone()).

        Args:
            props: Properties for the new instance.

        Returns:
            New instance of this class.
        """
        return cls(props)

    @property
    def props(self) -> Mapping[str, Any]:
        """Read-only view of the properties."""
        return MappingProxyType(self._props)

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Read a property.

        Args:
            key: Property name.
            default: Returned when the property is absent.

        Returns:
            The property value.

        Raises:
            KeyError: If absent and no default was given.
        """
        if default is _MISSING:
            return self._props[key]
        return self._props.get(key, default)

    def _set(self, key: str, value: Any) -> None:
        """Write a property (protected: call from behavior methods only)."""
        self._props[key] = value

    def _clone_props(self) -> dict[str, Any]:
        return dict(self._props)

    def clone(self) -> Self:
        """Create a shallow copy of the same concrete kind.

        Returns:
            New instance with the same props; nested values are shared.
        """
        return self.from_props(self._clone_props())

    def to_object(self, adapter: SupportsAdaptOne[Any, Any] | None = None) -> Any:
        """Project to a plain, JSON-ready value.

        Args:
            adapter: Optional adapter. When it supports adapt_one, the
                default projection is bypassed entirely.

        Returns:
            adapter.adapt_one(self), or the default plain projection.
        """
        if adapter is not None and isinstance(adapter, SupportsAdaptOne):
            return adapter.adapt_one(self)
        return self._project()

    def _project(self) -> PlainObject:
        return serialize_props(self._props)

    def equals(self, other: Any) -> bool:
        """Compare under this kind's equality policy."""
        return self is other

    def deep_equals(self, other: Any) -> bool:
        """Compare every property structurally."""
        if self is other:
            return True
        if not isinstance(other, PropertyContainer):
            return False
        return structurally_equal(self._props, other._props)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._props!r})"
