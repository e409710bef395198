"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Kernel components that log
(event recorders, serializers) depend on this protocol, never on a logging
library directly; the container wires a concrete adapter.

Log Levels (standard 5-level hierarchy):
    - DEBUG: Event buffering, projection details
    - INFO: Normal operational events
    - WARNING: Recoverable problems (e.g. unencodable projection)
    - ERROR: Operation failed, caller continues
    - CRITICAL: Unrecoverable failure

Usage:
    from ddd_kernel.core.container import get_logger
    from ddd_kernel.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.debug("event_applied", event_type="OrderPlaced", aggregate_id=str(order.id))

    # Scoped logging with bind()
    order_logger = logger.bind(aggregate_id=str(order.id))
    order_logger.info("events_committed", event_count=3)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: event name + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Event name or short message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context included in every subsequent log call.

        Returns:
            New logger instance with bound context.
        """
        ...
