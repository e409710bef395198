"""Output serializers built on the projection engine."""

from ddd_kernel.infrastructure.serialization.json_serializer import JsonSerializer

__all__ = ["JsonSerializer"]
