"""ddd_kernel - identity and projection model for domain-driven code.

Base abstractions for entities, aggregates and value objects, a
success/failure Result type, and a recursive projection engine turning a
graph of domain objects into plain, JSON-ready values.

Usage:
    from ddd_kernel import Entity, Identifier, Result, ValueObject

    class Address(ValueObject):
        pass

    class User(Entity):
        pass

    user = User({"name": "Ada", "address": Address({"city": "London"})})
    user.to_object()
    # {'name': 'Ada', 'address': {'city': 'London'}, 'id': '0190...'}
"""

from ddd_kernel.core.frozen_constant import FrozenConstant, create_constant
from ddd_kernel.core.result import Failure, Result, Success, combine
from ddd_kernel.domain.adapters import Adapter, PydanticModelAdapter
from ddd_kernel.domain.entities import Aggregate, Entity
from ddd_kernel.domain.events import DomainEvent, InMemoryEventRecorder
from ddd_kernel.domain.identifier import Identifier
from ddd_kernel.domain.property_container import PropertyContainer
from ddd_kernel.domain.serialization import (
    PlainObject,
    PlainValue,
    serialize_props,
    to_plain,
)
from ddd_kernel.domain.value_objects import ValueObject

__version__ = "0.1.0"

__all__ = [
    "Adapter",
    "Aggregate",
    "DomainEvent",
    "Entity",
    "Failure",
    "FrozenConstant",
    "Identifier",
    "InMemoryEventRecorder",
    "PlainObject",
    "PlainValue",
    "PropertyContainer",
    "PydanticModelAdapter",
    "Result",
    "Success",
    "ValueObject",
    "combine",
    "create_constant",
    "serialize_props",
    "to_plain",
]
