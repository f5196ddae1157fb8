"""Domain value objects.

Usage:
    from route_catalog.domain.value_objects import (
        AuthorizeAnnotation,
        MemberMetadata,
        RouteDescriptor,
    )
"""

from route_catalog.domain.value_objects.annotation import (
    Annotation,
    AreaAnnotation,
    AuthorizeAnnotation,
    DisplayNameAnnotation,
)
from route_catalog.domain.value_objects.member_metadata import MemberMetadata
from route_catalog.domain.value_objects.route_descriptor import RouteDescriptor

__all__ = [
    "Annotation",
    "AreaAnnotation",
    "AuthorizeAnnotation",
    "DisplayNameAnnotation",
    "MemberMetadata",
    "RouteDescriptor",
]
