"""UUID versions available for generated identifiers.

- UUID7: Time-ordered (sortable by creation time, index friendly). Default.
- UUID4: Fully random.
"""

from enum import Enum


class IdentifierVersion(str, Enum):
    """UUID version used when generating new identifiers."""

    UUID7 = "uuid7"
    UUID4 = "uuid4"
