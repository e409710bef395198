"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `ddd_kernel/core/config.py` instead.

Categories:
- Identifiers: Canonical lengths and reserved property names
- Projection: Default limits for the plain-object projection engine

Example:
    >>> from ddd_kernel.core.constants import IDENTIFIER_LENGTH
    >>> len(Identifier.create().unwrap().value()) == IDENTIFIER_LENGTH
    True
"""

# =============================================================================
# Identifiers
# =============================================================================

IDENTIFIER_LENGTH: int = 36
"""Length of a generated identifier (canonical 8-4-4-4-12 UUID string)."""

ID_PROPERTY: str = "id"
"""Distinguished property name holding an Entity's identifier."""


# =============================================================================
# Projection
# =============================================================================

PROJECTION_MAX_DEPTH_DEFAULT: int = 200
"""Default nesting limit for the projection engine."""

PROJECTION_MAX_DEPTH_CEILING: int = 900
"""Upper bound for the configurable limit. Deep graphs of nested domain objects
can hit the interpreter recursion limit first; the engine reports that as
ProjectionDepthError too."""
