"""Console logging adapter for kernel diagnostics.

Writes structured kernel events (event_applied, projection_serialized, ...)
to stdout through structlog. Every entry carries a ``component`` key so
kernel output can be told apart from the host application's own logs.

Rendering:
- use_json=False: colored key-value console output
- use_json=True: one JSON object per line

Satisfies LoggerProtocol structurally (PEP 544); there is no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

DEFAULT_COMPONENT = "ddd_kernel"


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """structlog-backed LoggerProtocol implementation.

    Attributes:
        _logger: structlog logger with ``component`` (and any bind()
            context) already attached.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        component: str = DEFAULT_COMPONENT,
    ) -> None:
        """Configure structlog and bind the component name.

        Args:
            use_json: Render JSON lines instead of colored console output.
            level: Minimum level name; unknown names filter at INFO.
            component: Value of the ``component`` key on every entry.
        """
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger().bind(component=component)

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level, adding error_type/error_message when given."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at critical level, adding error_type/error_message when given."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a sibling adapter with extra context on every entry.

        structlog is not reconfigured; the sibling shares the configuration
        and the component name of this adapter.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
