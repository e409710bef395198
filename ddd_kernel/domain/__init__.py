"""Domain layer - identity and projection model.

This layer contains the base abstractions concrete domain models build on.
It has NO dependencies on infrastructure.

Structure:
- identifier: Identifier value type (identity token)
- property_container: Controlled property bag shared by all domain objects
- entities/: Entity and Aggregate bases (mutable, have identity)
- value_objects/: ValueObject base (immutable by convention, no identity)
- events/: DomainEvent base and the in-memory event recorder
- adapters/: Strategies overriding the default projection
- protocols/: Ports (logger, event recorder, adapters, id generator)
- serialization: Plain-object projection engine
"""
