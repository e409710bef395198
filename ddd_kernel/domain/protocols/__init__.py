"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from ddd_kernel.domain.protocols import LoggerProtocol, SupportsAdaptOne
"""

from ddd_kernel.domain.protocols.adapter_protocol import (
    SupportsAdaptMany,
    SupportsAdaptOne,
)
from ddd_kernel.domain.protocols.event_recorder_protocol import EventRecorderProtocol
from ddd_kernel.domain.protocols.identifier_generator_protocol import (
    IdentifierGeneratorProtocol,
)
from ddd_kernel.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "EventRecorderProtocol",
    "IdentifierGeneratorProtocol",
    "LoggerProtocol",
    "SupportsAdaptMany",
    "SupportsAdaptOne",
]
