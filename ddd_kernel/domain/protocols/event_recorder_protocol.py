"""Event recorder protocol (port) for aggregates.

Aggregates record domain events through this capability instead of
inheriting from an event-sourcing runtime. The recorder buffers events in the
order they were applied; publishing, persisting and clearing them is the
recorder's (or its consumer's) concern.

Implementations:
    - InMemoryEventRecorder: ddd_kernel/domain/events/event_recorder.py

Usage:
    >>> order = Order({"total": 10}, recorder=InMemoryEventRecorder())
    >>> order.apply(OrderPlaced(order_id=order.id.value()))
    >>> order.get_uncommitted_events()
    [OrderPlaced(...)]
"""

from typing import Protocol

from ddd_kernel.domain.events.base_event import DomainEvent


class EventRecorderProtocol(Protocol):
    """Buffer of uncommitted domain events."""

    def apply(self, event: DomainEvent) -> None:
        """Record an event as uncommitted.

        Args:
            event: Domain event to append.
        """
        ...

    def get_uncommitted_events(self) -> list[DomainEvent]:
        """Return uncommitted events in the order they were applied.

        Returns:
            A new list; mutating it does not affect the recorder.
        """
        ...
