"""Adapters overriding the default plain projection.

Usage:
    from ddd_kernel.domain.adapters import Adapter, PydanticModelAdapter
"""

from ddd_kernel.domain.adapters.base_adapter import Adapter
from ddd_kernel.domain.adapters.pydantic_adapter import PydanticModelAdapter

__all__ = ["Adapter", "PydanticModelAdapter"]
