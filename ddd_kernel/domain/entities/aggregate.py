"""Aggregate root base class.

An aggregate is an Entity-shaped consistency boundary that also records
domain events. Event recording is a composed capability
(EventRecorderProtocol), not inherited from an event-sourcing runtime; the
aggregate only forwards apply()/get_uncommitted_events() to it.

Architecture:
    - Same id/props contract and equality policy as Entity
    - Recorder injected at construction (default: InMemoryEventRecorder)
    - No event replay or event-store persistence here

Usage:
    @dataclass(frozen=True, kw_only=True, slots=True)
    class OrderPlaced(DomainEvent):
        order_id: str

    class Order(Aggregate):
        def place(self) -> None:
            self._set("status", "placed")
            self.apply(OrderPlaced(order_id=self.id.value()))

    order = Order({"status": "draft"})
    order.place()
    order.get_uncommitted_events()  # [OrderPlaced(...)]
"""

from collections.abc import Mapping
from typing import Any

from ddd_kernel.domain.entities.entity import Entity
from ddd_kernel.domain.events.base_event import DomainEvent
from ddd_kernel.domain.events.event_recorder import InMemoryEventRecorder
from ddd_kernel.domain.protocols.event_recorder_protocol import EventRecorderProtocol
from ddd_kernel.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)


class Aggregate(Entity):
    """Entity-shaped root that records domain events.

    Cloning:
        clone() keeps props and identifier but starts with a fresh default
        recorder; uncommitted events stay with the original.

    Attributes:
        _recorder: Event recording capability.
    """

    def __init__(
        self,
        props: Mapping[str, Any],
        *,
        id_generator: IdentifierGeneratorProtocol | None = None,
        recorder: EventRecorderProtocol | None = None,
    ) -> None:
        """Initialize aggregate from props.

        Args:
            props: Properties, optionally including ``id`` (see Entity).
            id_generator: Generator used when a new identifier is needed.
            recorder: Event recorder (default: new InMemoryEventRecorder).
        """
        super().__init__(props, id_generator=id_generator)
        self._recorder: EventRecorderProtocol = (
            recorder if recorder is not None else InMemoryEventRecorder()
        )

    @property
    def recorder(self) -> EventRecorderProtocol:
        """The event recording capability."""
        return self._recorder

    def apply(self, event: DomainEvent) -> None:
        """Record a domain event as uncommitted."""
        self._recorder.apply(event)

    def get_uncommitted_events(self) -> list[DomainEvent]:
        """Return uncommitted events in the order they were applied."""
        return self._recorder.get_uncommitted_events()
