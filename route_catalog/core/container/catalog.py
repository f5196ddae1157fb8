"""Handler catalog factories.

The discovery service is not a process-wide singleton: each call builds a
new catalog from the given source. Callers keep the returned instance and
pass it to whoever needs catalog queries.
"""

from typing import TYPE_CHECKING

from route_catalog.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from route_catalog.application.services.handler_discovery_service import (
        HandlerDiscoveryService,
    )
    from route_catalog.core.config import Settings
    from route_catalog.domain.protocols import DescriptorSource, LoggerProtocol


def build_handler_discovery_service(
    source: "DescriptorSource",
    *,
    settings: "Settings | None" = None,
    logger: "LoggerProtocol | None" = None,
) -> "HandlerDiscoveryService":
    """Build a HandlerDiscoveryService wired with settings and logger.

    Args:
        source: Descriptor source to snapshot.
        settings: Settings override. Defaults to process settings.
        logger: Logger override. Defaults to get_logger().

    Returns:
        New HandlerDiscoveryService.

    Usage:
        discovery = build_handler_discovery_service(FastAPIRouteSource(app))
        app.include_router(create_catalog_router(discovery))
    """
    from route_catalog.application.services.handler_discovery_service import (
        HandlerDiscoveryService,
    )

    return HandlerDiscoveryService(
        source,
        logger=logger or get_logger(),
        settings=settings,
    )
