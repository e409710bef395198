"""Domain events package.

Exports the DomainEvent base and the default in-memory event recorder.

Usage:
    from ddd_kernel.domain.events import DomainEvent, InMemoryEventRecorder
"""

from ddd_kernel.domain.events.base_event import DomainEvent
from ddd_kernel.domain.events.event_recorder import InMemoryEventRecorder

__all__ = ["DomainEvent", "InMemoryEventRecorder"]
