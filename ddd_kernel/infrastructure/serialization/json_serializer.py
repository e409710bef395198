"""JSON serializer for domain objects.

Renders the plain projection of a domain object (or any projectable value)
as a JSON string. Types the projection deliberately leaves typed are encoded
here:
    - date/datetime/time -> ISO-8601 string
    - Decimal            -> string (no float precision loss)
    - UUID               -> canonical string

Failures are returned as data, never raised:
    - Projection cycle/depth violations -> Failure(SerializationError)
    - Values json cannot encode          -> Failure(SerializationError)

Usage:
    >>> from ddd_kernel.core.container import get_json_serializer
    >>> serializer = get_json_serializer()
    >>> serializer.serialize(order).unwrap()
    '{"total": "10.00", "placed_at": "2024-01-01T00:00:00+00:00", "id": "..."}'
"""

import json
from collections.abc import Iterable
from datetime import date, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from ddd_kernel.core.enums import ErrorCode
from ddd_kernel.core.errors import ProjectionError, SerializationError
from ddd_kernel.core.result import Failure, Result, Success
from ddd_kernel.domain.protocols.adapter_protocol import (
    SupportsAdaptMany,
    SupportsAdaptOne,
)
from ddd_kernel.domain.protocols.logger_protocol import LoggerProtocol
from ddd_kernel.domain.serialization import to_plain


def _encode_default(value: Any) -> Any:
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonSerializer:
    """Project and render domain objects as JSON.

    Attributes:
        _logger: Logger for serialization outcomes.
        _indent: Indentation passed to json.dumps (None = compact).
    """

    def __init__(self, logger: LoggerProtocol, *, indent: int | None = None) -> None:
        """Initialize serializer.

        Args:
            logger: Logger for serialization outcomes.
            indent: Optional json.dumps indentation.
        """
        self._logger = logger
        self._indent = indent

    def serialize(
        self,
        value: Any,
        adapter: SupportsAdaptOne[Any, Any] | None = None,
    ) -> Result[str, SerializationError]:
        """Project value and render it as JSON.

        Args:
            value: Domain object, collection or scalar.
            adapter: Optional adapter applied to value before projection.

        Returns:
            Success(json_string) or Failure(SerializationError).
        """
        value_type = type(value).__name__
        source = adapter.adapt_one(value) if adapter is not None else value
        try:
            payload = json.dumps(
                to_plain(source),
                default=_encode_default,
                ensure_ascii=False,
                indent=self._indent,
            )
        except (ProjectionError, TypeError, ValueError) as e:
            self._logger.warning(
                "projection_serialization_failed",
                value_type=value_type,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return Failure(
                error=SerializationError(
                    code=ErrorCode.SERIALIZATION_FAILED,
                    message=str(e),
                    value_type=value_type,
                )
            )

        self._logger.debug(
            "projection_serialized",
            value_type=value_type,
            size_bytes=len(payload.encode("utf-8")),
        )
        return Success(value=payload)

    def serialize_many(
        self,
        values: Iterable[Any],
        adapter: SupportsAdaptOne[Any, Any] | SupportsAdaptMany[Any, Any] | None = None,
    ) -> Result[str, SerializationError]:
        """Render several values as one JSON array.

        Args:
            values: Items to project, in order.
            adapter: Optional adapter. adapt_many is preferred when available,
                otherwise adapt_one is applied to each item.

        Returns:
            Success(json_array_string) or Failure(SerializationError).
        """
        items = list(values)
        if isinstance(adapter, SupportsAdaptMany):
            items = adapter.adapt_many(items)
        elif isinstance(adapter, SupportsAdaptOne):
            items = [adapter.adapt_one(item) for item in items]
        return self.serialize(items)
