"""Entity base class.

An entity is distinguished by identity, not by its property values. Two
entities with the same Identifier are equal even when their other properties
differ; deep_equals() additionally compares every property.

Architecture:
    - Property container + distinguished, immutable ``id``
    - ``id`` is removed from the props bag and only reachable through the
      read-only ``id`` attribute
    - State changes go through behavior methods that call _set()

Usage:
    from ddd_kernel.domain.entities import Entity

    class User(Entity):
        @property
        def name(self) -> str:
            return self.get("name")

        def rename(self, name: str) -> None:
            self._set("name", name)

    user = User({"id": "user-1", "name": "Ada"})
    user.is_new()       # False (id supplied)
    user.to_object()    # {'name': 'Ada', 'id': 'user-1'}

    draft = User({"name": "Grace"})
    draft.is_new()      # True (id generated)
"""

from collections.abc import Mapping
from typing import Any

from ddd_kernel.core.constants import ID_PROPERTY
from ddd_kernel.core.errors import IdentityProtectionError
from ddd_kernel.domain.identifier import Identifier
from ddd_kernel.domain.property_container import (
    _MISSING,
    PropertyContainer,
    structurally_equal,
)
from ddd_kernel.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)
from ddd_kernel.domain.serialization import PlainObject, serialize_props


class Entity(PropertyContainer):
    """Base class for identity-bearing domain objects.

    Equality:
        equals()/== compare identifiers only and are reflexive.
        deep_equals() requires equal identifiers and structurally equal props.

    Hashing:
        By identifier, which never changes after construction.

    Attributes:
        _id: Identifier fixed at construction.
    """

    def __init__(
        self,
        props: Mapping[str, Any],
        *,
        id_generator: IdentifierGeneratorProtocol | None = None,
    ) -> None:
        """Initialize entity from props.

        Args:
            props: Properties. ``props["id"]`` may be a string, an
                Identifier, or absent/None to generate a new identifier.
            id_generator: Generator used when a new identifier is needed.

        Raises:
            ResultUnwrapError: If ``props["id"]`` is not a valid identifier.
        """
        own_props = dict(props)
        raw_id = own_props.pop(ID_PROPERTY, None)

        if isinstance(raw_id, Identifier):
            identifier = raw_id
        else:
            identifier = Identifier.create(raw_id, generator=id_generator).unwrap()

        super().__init__(own_props)
        self._id = identifier

    @property
    def id(self) -> Identifier:
        """Identifier of this entity (read-only)."""
        return self._id

    def is_new(self) -> bool:
        """Check whether the identifier was generated (not yet persisted)."""
        return self._id.is_new()

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Read a property other than ``id``.

        Raises:
            IdentityProtectionError: If key is ``id``.
            KeyError: If absent and no default was given.
        """
        if key == ID_PROPERTY:
            raise IdentityProtectionError("get", type(self).__name__)
        if default is _MISSING:
            return super().get(key)
        return super().get(key, default)

    def _set(self, key: str, value: Any) -> None:
        if key == ID_PROPERTY:
            raise IdentityProtectionError("set", type(self).__name__)
        super()._set(key, value)

    def _clone_props(self) -> dict[str, Any]:
        return {**self._props, ID_PROPERTY: self._id}

    def _project(self) -> PlainObject:
        return {**serialize_props(self._props), ID_PROPERTY: self._id.value()}

    def equals(self, other: Any) -> bool:
        """Compare by identity.

        Args:
            other: Entity to compare against.

        Returns:
            True if same instance or same identifier value.
        """
        if other is self:
            return True
        if not isinstance(other, Entity):
            return False
        return self._id.equals(other.id)

    def deep_equals(self, other: Any) -> bool:
        """Compare identity and every property structurally."""
        if other is self:
            return True
        if not isinstance(other, Entity):
            return False
        return self._id.equals(other.id) and structurally_equal(
            self._props, other._props
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value()!r}, props={self._props!r})"
