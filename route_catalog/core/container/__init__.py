"""Container module - centralized dependency wiring.

- infrastructure: Application-scoped services (logging)
- catalog: Handler discovery service factory

Usage:
    from route_catalog.core.container import build_handler_discovery_service, get_logger
"""

from route_catalog.core.container.catalog import build_handler_discovery_service
from route_catalog.core.container.infrastructure import get_logger

__all__ = [
    "build_handler_discovery_service",
    "get_logger",
]
