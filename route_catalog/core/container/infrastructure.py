"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter, human-readable or JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from route_catalog.core.config import settings

if TYPE_CHECKING:
    from route_catalog.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Renderer selection is centralized here (composition root):
    - development: human-readable console output
    - testing/ci/production: JSON lines

    Every event carries the application name and version.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from route_catalog.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
        app=settings.app_name,
        version=settings.app_version,
    )
