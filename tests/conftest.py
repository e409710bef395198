"""Shared pytest fixtures.

Fixtures:
- fixed_generator: deterministic identifier generator
- isolated_settings: fresh Settings/container caches per test
- mock_logger: MagicMock standing in for LoggerProtocol
"""

from collections.abc import Iterator
from itertools import count
from unittest.mock import MagicMock

import pytest

from ddd_kernel.core import container
from ddd_kernel.core.config import get_settings


@pytest.fixture
def fixed_generator():
    """Identifier generator yielding gen-1, gen-2, ..."""
    counter = count(1)
    return lambda: f"gen-{next(counter)}"


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording every call."""
    return MagicMock()


@pytest.fixture
def isolated_settings() -> Iterator[None]:
    """Clear cached settings and container singletons around a test."""
    caches = (
        get_settings,
        container.get_logger,
        container.get_identifier_generator,
        container.get_json_serializer,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
