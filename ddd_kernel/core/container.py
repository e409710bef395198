"""Container module - Centralized dependency wiring (composition root).

Factory functions choosing concrete adapters from Settings. Domain code
depends only on protocols; callers that want configured collaborators ask
the container for them.

Usage:
    from ddd_kernel.core.container import get_event_recorder, get_logger

    logger = get_logger()
    order = Order(props, recorder=get_event_recorder())

Caching:
    Stateless singletons (logger, serializer, generator) are lru_cached.
    Event recorders hold per-aggregate state and are created on each call.
    Call ``<factory>.cache_clear()`` after changing settings (tests).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from ddd_kernel.core.config import get_settings
from ddd_kernel.core.enums import IdentifierVersion

if TYPE_CHECKING:
    from ddd_kernel.domain.events.event_recorder import InMemoryEventRecorder
    from ddd_kernel.domain.protocols.identifier_generator_protocol import (
        IdentifierGeneratorProtocol,
    )
    from ddd_kernel.domain.protocols.logger_protocol import LoggerProtocol
    from ddd_kernel.infrastructure.serialization.json_serializer import JsonSerializer


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Adapter selection is centralized here:
    - development/production: ConsoleAdapter (human-readable unless log_json)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from ddd_kernel.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_identifier_generator() -> "IdentifierGeneratorProtocol":
    """Return the identifier generator selected by Settings.identifier_version.

    Returns:
        IdentifierGeneratorProtocol: generate_uuid7 or generate_uuid4.
    """
    from ddd_kernel.domain.identifier import generate_uuid4, generate_uuid7

    if get_settings().identifier_version == IdentifierVersion.UUID4:
        return generate_uuid4
    return generate_uuid7


def get_event_recorder() -> "InMemoryEventRecorder":
    """Create a new event recorder wired to the application logger.

    Returns:
        InMemoryEventRecorder: Fresh, empty recorder (one per aggregate).
    """
    from ddd_kernel.domain.events.event_recorder import InMemoryEventRecorder

    return InMemoryEventRecorder(logger=get_logger())


@lru_cache()
def get_json_serializer() -> "JsonSerializer":
    """Return the JSON serializer singleton.

    Returns:
        JsonSerializer: Serializer wired to the application logger.
    """
    from ddd_kernel.infrastructure.serialization.json_serializer import JsonSerializer

    return JsonSerializer(logger=get_logger())
