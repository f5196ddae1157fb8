"""route-catalog: read-only catalog of route handlers, their security, and policies.

Usage:
    from route_catalog import HandlerDiscoveryService
    from route_catalog.infrastructure.discovery import ClassHandlerSource, authorize
"""

from route_catalog.application.services import HandlerDiscoveryService
from route_catalog.core.errors import CatalogConsistencyError, InvalidArgumentError
from route_catalog.domain.entities import HandlerAction, HandlerGroup
from route_catalog.domain.value_objects import MemberMetadata, RouteDescriptor

__all__ = [
    "CatalogConsistencyError",
    "HandlerAction",
    "HandlerDiscoveryService",
    "HandlerGroup",
    "InvalidArgumentError",
    "MemberMetadata",
    "RouteDescriptor",
]
