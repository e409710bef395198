"""Identifier generator protocol.

Source of fresh identity strings for Identifier.create(). Injected so tests
can pin generated values and deployments can pick the UUID version.

Usage:
    >>> generator: IdentifierGeneratorProtocol = lambda: "fixed-id"
    >>> Identifier.create(generator=generator).unwrap().value()
    'fixed-id'
"""

from typing import Protocol


class IdentifierGeneratorProtocol(Protocol):
    """Zero-argument callable returning a new, globally unique string."""

    def __call__(self) -> str: ...
