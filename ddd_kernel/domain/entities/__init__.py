"""Domain entity base classes.

Usage:
    from ddd_kernel.domain.entities import Aggregate, Entity
"""

from ddd_kernel.domain.entities.aggregate import Aggregate
from ddd_kernel.domain.entities.entity import Entity

__all__ = ["Aggregate", "Entity"]
