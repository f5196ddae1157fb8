"""Pytest configuration and shared fixtures.

Provides:
1. A mock logger implementing LoggerProtocol (no structlog output)
2. Catalog settings independent of the process environment
3. The Orders/Users example source used across service and API tests
"""

from unittest.mock import MagicMock

import pytest

from route_catalog.core.config import Settings
from route_catalog.infrastructure.discovery import StaticDescriptorSource
from tests.utils.descriptors import example_descriptors


@pytest.fixture
def mock_logger():
    """MagicMock logger whose bind() returns itself."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def catalog_settings():
    """Default catalog settings."""
    return Settings(environment="testing")


@pytest.fixture
def example_source():
    """Static source over the Orders/Users example."""
    return StaticDescriptorSource(example_descriptors())
