"""In-memory event recorder.

Default EventRecorderProtocol implementation used by Aggregate. Keeps
uncommitted events in a list, in application order. Suitable for
single-process use; the consumer that persists or publishes events calls
commit() (or uncommit()) once it is done with them.

Usage:
    >>> from ddd_kernel.core.container import get_logger
    >>> recorder = InMemoryEventRecorder(logger=get_logger())
    >>> recorder.apply(OrderPlaced(order_id="o-1"))
    >>> events = recorder.commit()  # Returns buffered events, clears buffer
"""

from ddd_kernel.domain.events.base_event import DomainEvent
from ddd_kernel.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventRecorder:
    """List-backed buffer of uncommitted domain events.

    Implements EventRecorderProtocol.

    Thread Safety:
        NOT thread-safe. Each aggregate owns its own recorder; concurrent
        access to one aggregate must be serialized by the caller.

    Attributes:
        _events: Uncommitted events in application order.
        _logger: Optional logger; when absent the recorder is silent.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        """Initialize an empty recorder.

        Args:
            logger: Optional logger for debug-level buffering logs.
        """
        self._events: list[DomainEvent] = []
        self._logger = logger

    def apply(self, event: DomainEvent) -> None:
        """Append an event to the uncommitted buffer."""
        self._events.append(event)
        if self._logger is not None:
            self._logger.debug(
                "event_applied",
                event_type=type(event).__name__,
                event_id=str(event.event_id),
                uncommitted_count=len(self._events),
            )

    def get_uncommitted_events(self) -> list[DomainEvent]:
        """Return a copy of the uncommitted events, oldest first."""
        return list(self._events)

    def commit(self) -> list[DomainEvent]:
        """Hand over the buffered events and clear the buffer.

        Returns:
            The events that were uncommitted, oldest first.
        """
        committed = self._events
        self._events = []
        if self._logger is not None:
            self._logger.debug("events_committed", event_count=len(committed))
        return committed

    def uncommit(self) -> None:
        """Discard all uncommitted events."""
        discarded = len(self._events)
        self._events.clear()
        if self._logger is not None:
            self._logger.debug("events_discarded", event_count=discarded)

    def __len__(self) -> int:
        return len(self._events)
