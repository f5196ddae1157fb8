"""Application services for the handler catalog.

Usage:
    from route_catalog.application.services import HandlerDiscoveryService
"""

from route_catalog.application.services.catalog_builder import (
    HandlerCatalogBuilder,
    project_secured,
)
from route_catalog.application.services.handler_discovery_service import (
    HandlerDiscoveryService,
)
from route_catalog.application.services.policy_query import filter_by_policy

__all__ = [
    "HandlerCatalogBuilder",
    "HandlerDiscoveryService",
    "filter_by_policy",
    "project_secured",
]
