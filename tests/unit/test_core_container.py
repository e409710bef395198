"""Unit tests for the container factories.

Tests cover:
- Logger singleton and settings-driven renderer choice
- Identifier generator selection by Settings.identifier_version
- Event recorder freshness (one per aggregate)
- JSON serializer singleton wiring
"""

import os
from unittest.mock import patch

import pytest

from ddd_kernel.core.container import (
    get_event_recorder,
    get_identifier_generator,
    get_json_serializer,
    get_logger,
)
from ddd_kernel.domain.events import InMemoryEventRecorder
from ddd_kernel.domain.identifier import generate_uuid4, generate_uuid7
from ddd_kernel.infrastructure.logging import ConsoleAdapter
from ddd_kernel.infrastructure.serialization import JsonSerializer


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger()."""

    def test_returns_console_adapter_singleton(self, isolated_settings):
        """Test the logger is created once and cached."""
        logger = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        assert get_logger() is logger

    def test_uses_json_renderer_in_testing(self, isolated_settings):
        """Test testing environment selects JSON logs."""
        env = {"ENVIRONMENT": "testing", "LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env, clear=True):
            with patch(
                "ddd_kernel.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_adapter:
                get_logger()

        mock_adapter.assert_called_once_with(use_json=True, level="DEBUG")


@pytest.mark.unit
class TestGetIdentifierGenerator:
    """Test get_identifier_generator()."""

    def test_defaults_to_uuid7(self, isolated_settings):
        """Test UUIDv7 generation without configuration."""
        with patch.dict(os.environ, {}, clear=True):
            generator = get_identifier_generator()

        assert generator is generate_uuid7

    def test_uuid4_when_configured(self, isolated_settings):
        """Test IDENTIFIER_VERSION=uuid4 selects random UUIDs."""
        with patch.dict(os.environ, {"IDENTIFIER_VERSION": "uuid4"}, clear=True):
            generator = get_identifier_generator()

        assert generator is generate_uuid4
        assert generator()[14] == "4"


@pytest.mark.unit
class TestGetEventRecorder:
    """Test get_event_recorder()."""

    def test_returns_fresh_recorder_each_call(self, isolated_settings):
        """Test recorders are never shared between aggregates."""
        first = get_event_recorder()
        second = get_event_recorder()

        assert isinstance(first, InMemoryEventRecorder)
        assert first is not second
        assert len(first) == 0


@pytest.mark.unit
class TestGetJsonSerializer:
    """Test get_json_serializer()."""

    def test_returns_singleton(self, isolated_settings):
        """Test the serializer is created once and cached."""
        serializer = get_json_serializer()

        assert isinstance(serializer, JsonSerializer)
        assert get_json_serializer() is serializer

    def test_serializes_plain_mapping(self, isolated_settings):
        """Test the wired serializer renders a projection."""
        result = get_json_serializer().serialize({"a": 1})

        assert result.unwrap() == '{"a": 1}'
