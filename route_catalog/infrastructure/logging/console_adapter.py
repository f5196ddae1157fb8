"""structlog adapter for LoggerProtocol.

Configures structlog once per adapter construction and renders each event
as a JSON line or, for local development, as colored console output.
Structural implementation of the protocol; no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


class ConsoleAdapter:
    """Console logger for the handler catalog.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name; unknown names fall back to INFO.
        **initial_context: Context bound to every record (e.g. app name).
    """

    def __init__(
        self, *, use_json: bool = False, level: str = "INFO", **initial_context: Any
    ) -> None:
        """Configure structlog and bind the initial context."""
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        logger = structlog.get_logger()
        self._logger = logger.bind(**initial_context) if initial_context else logger

    @staticmethod
    def _with_error(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        return context

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message, adding error_type/error_message when given."""
        self._logger.error(message, **self._with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message, adding error_type/error_message when given."""
        self._logger.critical(message, **self._with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """New adapter whose events also carry context (no reconfiguration)."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
