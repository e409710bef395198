"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (e.g., OrderPlaced, ItemRemoved). Aggregates
record them through an EventRecorderProtocol; they are projected like any
other dataclass by the projection engine.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class OrderPlaced(DomainEvent):
    ...     order_id: str
    ...     total: Decimal
    >>>
    >>> event = OrderPlaced(order_id="o-1", total=Decimal("10.00"))
    >>> event.event_id      # Auto-generated UUID
    >>> event.occurred_at   # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (OrderPlaced, NOT PlaceOrder)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            if not provided. Used for deduplication and correlation.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided. Used for ordering and replay.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name (e.g. "OrderPlaced")."""
        return type(self).__name__
