"""Handler annotation value objects.

Annotations are declarative markers attached to a handler group or action.
They are plain data: discovery adapters extract them from decorators, route
tags, or registry entries, and the catalog only ever reads them.

Types:
    Annotation: Generic marker (kind + category + positional arguments)
    AuthorizeAnnotation: Access-control marker with optional policy and roles
    DisplayNameAnnotation: Human-readable label
    AreaAnnotation: Sub-namespace label used to group handlers

Usage:
    from route_catalog.domain.value_objects import AuthorizeAnnotation

    admin_only = AuthorizeAnnotation(policy="Admin")
    admin_only.category
    <AnnotationCategory.AUTHORIZATION: 'authorization'>
"""

from dataclasses import dataclass
from typing import Any

from route_catalog.domain.enums import AnnotationCategory
from route_catalog.domain.errors import CatalogError


@dataclass(frozen=True, slots=True, kw_only=True)
class Annotation:
    """Declarative marker attached to a handler group or action.

    Attributes:
        kind: Short marker name (e.g. "authorize", "deprecated").
        category: Category used for filtering attribute lists.
        arguments: Positional values the marker was declared with.
    """

    kind: str
    category: AnnotationCategory = AnnotationCategory.DECLARATIVE
    arguments: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        """Validate annotation kind.

        Raises:
            ValueError: If kind is empty.
        """
        if not self.kind or not self.kind.strip():
            raise ValueError(CatalogError.INVALID_ANNOTATION_KIND)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizeAnnotation(Annotation):
    """Marks a handler group or action as requiring authorization.

    Attributes:
        policy: Named access-control policy, or None for "any authenticated".
        roles: Role names accepted by the handler.
    """

    kind: str = "authorize"
    category: AnnotationCategory = AnnotationCategory.AUTHORIZATION
    policy: str | None = None
    roles: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class DisplayNameAnnotation(Annotation):
    """Human-readable label for a handler group or action.

    Attributes:
        display_name: Label shown instead of the handler name.
    """

    kind: str = "display_name"
    category: AnnotationCategory = AnnotationCategory.DISPLAY
    display_name: str

    def __post_init__(self) -> None:
        """Validate display name.

        Raises:
            ValueError: If display_name is empty.
        """
        super(DisplayNameAnnotation, self).__post_init__()
        if not self.display_name or not self.display_name.strip():
            raise ValueError(CatalogError.INVALID_DISPLAY_NAME)


@dataclass(frozen=True, slots=True, kw_only=True)
class AreaAnnotation(Annotation):
    """Places a handler group in a named area (sub-namespace).

    Attributes:
        area_name: Area label as declared (normalized by the catalog).
    """

    kind: str = "area"
    category: AnnotationCategory = AnnotationCategory.ROUTING
    area_name: str

    def __post_init__(self) -> None:
        """Validate area name.

        Raises:
            ValueError: If area_name is empty.
        """
        super(AreaAnnotation, self).__post_init__()
        if not self.area_name or not self.area_name.strip():
            raise ValueError(CatalogError.INVALID_AREA_NAME)
