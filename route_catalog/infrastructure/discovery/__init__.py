"""Descriptor sources and the annotation decorators they read.

Usage:
    from route_catalog.infrastructure.discovery import (
        ClassHandlerSource,
        FastAPIRouteSource,
        authorize,
        display_name,
    )
"""

from route_catalog.infrastructure.discovery.annotations import (
    annotate,
    annotated,
    area,
    authorize,
    display_name,
)
from route_catalog.infrastructure.discovery.class_handler_source import (
    ClassHandlerSource,
)
from route_catalog.infrastructure.discovery.fastapi_route_source import (
    FastAPIRouteSource,
)
from route_catalog.infrastructure.discovery.introspection import member_metadata_for
from route_catalog.infrastructure.discovery.static_source import StaticDescriptorSource

__all__ = [
    "ClassHandlerSource",
    "FastAPIRouteSource",
    "StaticDescriptorSource",
    "annotate",
    "annotated",
    "area",
    "authorize",
    "display_name",
    "member_metadata_for",
]
