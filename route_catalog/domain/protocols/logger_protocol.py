"""Logging port used by the catalog.

The builder and the discovery service only ever talk to this protocol; the
structlog adapter in ``infrastructure.logging`` satisfies it structurally.

Events emitted by the catalog:
    - info  ``handler_catalog_built``: group/action/secured counts
    - debug ``duplicate_action_skipped``: group, action
    - debug ``policy_query``: policy, matched group count

Usage:
    logger = get_logger().bind(component="handler_discovery")
    logger.debug("policy_query", policy="Admin", groups=1)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger: an event name plus keyword context."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure.

        Args:
            message: Event name.
            error: Exception to describe as error_type / error_message.
            **context: Event fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an unrecoverable failure (same arguments as error())."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds context to every event.

        The receiver keeps its own context unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as bind()."""
        ...
