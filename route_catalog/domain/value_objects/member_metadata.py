"""Member metadata value object.

Pre-extracted, language-neutral description of one annotated member: either
the type that owns a handler group or the function implementing an action.
Discovery adapters build it; the catalog reads it without any runtime
introspection of its own.

Usage:
    from route_catalog.domain.value_objects import AuthorizeAnnotation, MemberMetadata

    metadata = MemberMetadata(
        name="OrdersController",
        annotations=(AuthorizeAnnotation(policy="Admin"),),
    )
    metadata.policy
    'Admin'
"""

from collections.abc import Collection
from dataclasses import dataclass

from route_catalog.domain.enums import AnnotationCategory
from route_catalog.domain.value_objects.annotation import (
    Annotation,
    AreaAnnotation,
    AuthorizeAnnotation,
    DisplayNameAnnotation,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class MemberMetadata:
    """Annotations declared on a group-owning type or an action member.

    Attributes:
        name: Member name as declared (e.g. class or function name).
        annotations: Annotations in declaration order.
    """

    name: str
    annotations: tuple[Annotation, ...] = ()

    @property
    def authorization(self) -> AuthorizeAnnotation | None:
        """First authorization annotation, or None when not declared."""
        for annotation in self.annotations:
            if isinstance(annotation, AuthorizeAnnotation):
                return annotation
        return None

    @property
    def is_authorized(self) -> bool:
        """Whether the member carries an authorization annotation."""
        return self.authorization is not None

    @property
    def policy(self) -> str | None:
        """Policy name of the first authorization annotation."""
        authorization = self.authorization
        return authorization.policy if authorization is not None else None

    @property
    def display_name(self) -> str | None:
        """Explicit display label, or None when not declared."""
        for annotation in self.annotations:
            if isinstance(annotation, DisplayNameAnnotation):
                return annotation.display_name
        return None

    @property
    def area_name(self) -> str | None:
        """Declared area label (not normalized), or None."""
        for annotation in self.annotations:
            if isinstance(annotation, AreaAnnotation):
                return annotation.area_name
        return None

    def visible_annotations(
        self, excluded: Collection[AnnotationCategory]
    ) -> tuple[Annotation, ...]:
        """Annotations whose category is not excluded, in declared order.

        Args:
            excluded: Categories to drop (e.g. compiler-generated markers).

        Returns:
            Filtered annotations.
        """
        return tuple(a for a in self.annotations if a.category not in excluded)
