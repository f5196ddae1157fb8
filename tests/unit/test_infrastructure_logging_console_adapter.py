"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods and structured context
- Error enrichment (error_type / error_message)
- Initial context and bind()/with_context()
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from route_catalog.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "route_catalog.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_structlog():
    with patch(STRUCTLOG) as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, mock_structlog, level):
        """Test each level forwards message and context unchanged."""
        adapter = ConsoleAdapter()

        getattr(adapter, level)("handler_catalog_built", groups=2, actions=3)

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "handler_catalog_built", groups=2, actions=3
        )

    def test_logs_with_no_context(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.info("Simple message")

        mock_structlog.get_logger.return_value.info.assert_called_once_with(
            "Simple message"
        )

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_error_details_added(self, mock_structlog, level):
        """Test error= adds error_type and error_message fields."""
        adapter = ConsoleAdapter()

        getattr(adapter, level)(
            "catalog_build_failed", error=ValueError("bad descriptor"), source="static"
        )

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "catalog_build_failed",
            source="static",
            error_type="ValueError",
            error_message="bad descriptor",
        )

    def test_error_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("Error occurred", retry_count=3)

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "Error occurred", retry_count=3
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_initial_context_is_bound(self, mock_structlog):
        base = mock_structlog.get_logger.return_value
        bound = MagicMock()
        base.bind.return_value = bound

        adapter = ConsoleAdapter(app="route-catalog", version="0.1.0")
        adapter.info("started")

        base.bind.assert_called_once_with(app="route-catalog", version="0.1.0")
        bound.info.assert_called_once_with("started")

    def test_no_initial_context_skips_bind(self, mock_structlog):
        ConsoleAdapter()

        mock_structlog.get_logger.return_value.bind.assert_not_called()

    def test_bind_returns_new_adapter(self, mock_structlog):
        base = mock_structlog.get_logger.return_value
        bound = MagicMock()
        base.bind.return_value = bound
        adapter = ConsoleAdapter()

        scoped = adapter.bind(component="handler_discovery")
        scoped.debug("policy_query", policy="Admin")

        assert scoped is not adapter
        assert isinstance(scoped, ConsoleAdapter)
        base.bind.assert_called_once_with(component="handler_discovery")
        bound.debug.assert_called_once_with("policy_query", policy="Admin")
        base.debug.assert_not_called()

    def test_with_context_is_bind_alias(self, mock_structlog):
        base = mock_structlog.get_logger.return_value
        adapter = ConsoleAdapter()

        scoped = adapter.with_context(operation="rebuild")

        assert isinstance(scoped, ConsoleAdapter)
        base.bind.assert_called_once_with(operation="rebuild")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=False)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value
        mock_structlog.processors.JSONRenderer.assert_not_called()

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("nonsense", logging.INFO),
        ],
    )
    def test_level_filtering(self, mock_structlog, level, expected):
        ConsoleAdapter(level=level)

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)
