"""Unit tests for JsonSerializer.

Tests cover:
- JSON rendering of projected domain objects
- Encoding of dates, decimals and UUIDs
- Adapters applied before rendering
- Failures returned as SerializationError data and logged
"""

import json
from datetime import UTC, date, datetime
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel

from ddd_kernel.core.enums import ErrorCode
from ddd_kernel.core.errors import SerializationError
from ddd_kernel.core.result import Failure, Success
from ddd_kernel.domain.adapters import Adapter, PydanticModelAdapter
from ddd_kernel.infrastructure.serialization import JsonSerializer
from tests.utils.domain_models import Address, Order, OrderStatus, User


class UserSchema(BaseModel):
    id: str
    name: str


class CityAdapter(Adapter[Address, dict[str, str]]):
    def adapt_one(self, source: Address) -> dict[str, str]:
        return {"town": source.city}


@pytest.fixture
def serializer(mock_logger):
    """Serializer with a mocked logger."""
    return JsonSerializer(logger=mock_logger)


@pytest.mark.unit
class TestJsonSerializerSerialize:
    """Test serialize()."""

    def test_serializes_entity(self, serializer):
        """Test an entity renders as its projection."""
        user = User({"id": "u-1", "name": "Ada", "home": Address({"city": "Lisbon"})})

        result = serializer.serialize(user)

        assert isinstance(result, Success)
        assert json.loads(result.value) == {
            "name": "Ada",
            "home": {"city": "Lisbon"},
            "id": "u-1",
        }

    def test_encodes_rich_scalars(self, serializer):
        """Test dates, decimals and UUIDs are rendered as strings."""
        value = {
            "at": datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
            "day": date(2024, 1, 1),
            "total": Decimal("10.50"),
            "ref": UUID("01890a5d-ac96-774b-bcce-b302099a8057"),
        }

        payload = json.loads(serializer.serialize(value).unwrap())

        assert payload == {
            "at": "2024-01-01T12:00:00+00:00",
            "day": "2024-01-01",
            "total": "10.50",
            "ref": "01890a5d-ac96-774b-bcce-b302099a8057",
        }

    def test_keeps_non_ascii_text(self, serializer):
        """Test text is not escaped to ASCII."""
        payload = serializer.serialize({"city": "Zürich"}).unwrap()

        assert "Zürich" in payload

    def test_indent_is_applied(self, mock_logger):
        """Test the configured indentation is used."""
        payload = JsonSerializer(mock_logger, indent=2).serialize({"a": 1}).unwrap()

        assert payload == '{\n  "a": 1\n}'

    def test_applies_adapter(self, serializer):
        """Test adapters reshape the value before rendering."""
        result = serializer.serialize(Address({"city": "Lisbon"}), CityAdapter())

        assert json.loads(result.unwrap()) == {"town": "Lisbon"}

    def test_applies_pydantic_model_adapter(self, serializer):
        """Test models produced by PydanticModelAdapter render as JSON."""
        user = User({"id": "u-1", "name": "Ada"})

        result = serializer.serialize(user, PydanticModelAdapter(UserSchema))

        assert json.loads(result.unwrap()) == {"id": "u-1", "name": "Ada"}

    def test_serializes_model_nested_in_props(self, serializer):
        """Test a model stored on an entity renders as a nested object."""
        user = User({"id": "u-1", "profile": UserSchema(id="p-1", name="Ada")})

        payload = json.loads(serializer.serialize(user).unwrap())

        assert payload == {"profile": {"id": "p-1", "name": "Ada"}, "id": "u-1"}

    def test_logs_success(self, serializer, mock_logger):
        """Test successful rendering is logged at debug."""
        serializer.serialize(Order({"id": "o-1", "status": OrderStatus.DRAFT}))

        mock_logger.debug.assert_called_once()
        args, kwargs = mock_logger.debug.call_args
        assert args == ("projection_serialized",)
        assert kwargs["value_type"] == "Order"
        assert kwargs["size_bytes"] > 0


@pytest.mark.unit
class TestJsonSerializerFailures:
    """Test failures returned as data."""

    def test_cycle_returns_failure(self, serializer):
        """Test projection cycles become SerializationError."""
        data: dict = {}
        data["self"] = data

        result = serializer.serialize(data)

        assert isinstance(result, Failure)
        assert isinstance(result.error, SerializationError)
        assert result.error.code == ErrorCode.SERIALIZATION_FAILED
        assert result.error.value_type == "dict"
        assert "Cycle detected" in result.error.message

    def test_too_deep_graph_returns_failure(self, serializer):
        """Test over-deep graphs become SerializationError data."""
        node = User({"id": "u-0"})
        for index in range(1, 400):
            node = User({"id": f"u-{index}", "child": node})

        result = serializer.serialize(node)

        assert result.is_err()
        assert result.get_err().code == ErrorCode.SERIALIZATION_FAILED
        assert result.get_err().value_type == "User"

    def test_unencodable_value_returns_failure(self, serializer):
        """Test values json cannot encode become SerializationError."""
        result = serializer.serialize({"blob": object()})

        assert result.is_err()
        assert "not JSON serializable" in result.get_err().message

    def test_failure_is_logged_as_warning(self, serializer, mock_logger):
        """Test failures are logged with the error details."""
        serializer.serialize({"blob": object()})

        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("projection_serialization_failed",)
        assert kwargs["value_type"] == "dict"
        assert kwargs["error_type"] == "TypeError"
        mock_logger.debug.assert_not_called()


@pytest.mark.unit
class TestJsonSerializerSerializeMany:
    """Test serialize_many()."""

    def test_renders_json_array(self, serializer):
        """Test values are rendered as one array in order."""
        users = [User({"id": "u-1", "name": "Ada"}), User({"id": "u-2", "name": "Grace"})]

        payload = json.loads(serializer.serialize_many(users).unwrap())

        assert payload == [{"name": "Ada", "id": "u-1"}, {"name": "Grace", "id": "u-2"}]

    def test_pydantic_adapter_batch(self, serializer):
        """Test PydanticModelAdapter.adapt_many output renders as an array."""
        users = [User({"id": "u-1", "name": "Ada"}), User({"id": "u-2", "name": "Grace"})]

        result = serializer.serialize_many(users, PydanticModelAdapter(UserSchema))

        assert json.loads(result.unwrap()) == [
            {"id": "u-1", "name": "Ada"},
            {"id": "u-2", "name": "Grace"},
        ]

    def test_uses_adapter_batch_operation(self, serializer):
        """Test adapt_many() is used when available."""
        addresses = [Address({"city": "Lisbon"}), Address({"city": "Porto"})]

        payload = json.loads(serializer.serialize_many(addresses, CityAdapter()).unwrap())

        assert payload == [{"town": "Lisbon"}, {"town": "Porto"}]

    def test_falls_back_to_adapt_one(self, serializer):
        """Test adapters without adapt_many() are applied per item."""

        class UpperCity:
            def adapt_one(self, source: Address) -> str:
                return source.city.upper()

        payload = serializer.serialize_many([Address({"city": "Lisbon"})], UpperCity())

        assert json.loads(payload.unwrap()) == ["LISBON"]

    def test_empty_input(self, serializer):
        """Test nothing to render yields an empty array."""
        assert serializer.serialize_many([]).unwrap() == "[]"
