"""Value objects package.

Usage:
    from ddd_kernel.domain.value_objects import ValueObject
"""

from ddd_kernel.domain.value_objects.value_object import ValueObject

__all__ = ["ValueObject"]
