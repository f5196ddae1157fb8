"""Decorators that attach catalog annotations to handlers.

Handler classes and endpoint functions declare their catalog metadata with
decorators. Each decorator stores an Annotation value on the target; the
descriptor sources read them back through ``introspection``.

Usage:
    from route_catalog.infrastructure.discovery import area, authorize, display_name

    @area("Admin")
    @authorize(policy="Staff")
    class UsersController:
        @display_name("View user")
        def view(self, user_id: str) -> None: ...

        @authorize(policy="Admin")
        def delete(self, user_id: str) -> None: ...

Stacked decorators keep their top-to-bottom declaration order.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from route_catalog.domain.enums import AnnotationCategory
from route_catalog.domain.value_objects import (
    Annotation,
    AreaAnnotation,
    AuthorizeAnnotation,
    DisplayNameAnnotation,
)

ANNOTATIONS_ATTRIBUTE = "__route_annotations__"

T = TypeVar("T")


def add_annotation(target: Any, annotation: Annotation) -> None:
    """Attach an annotation to a class or function.

    Decorators run bottom-up, so the new annotation is placed first to keep
    declaration order. A fresh tuple is stored each time; a subclass never
    writes into its base class's annotations.

    Args:
        target: Handler class or function.
        annotation: Annotation to attach.
    """
    if isinstance(target, type):
        existing = vars(target).get(ANNOTATIONS_ATTRIBUTE, ())
    else:
        existing = getattr(target, ANNOTATIONS_ATTRIBUTE, ())
    setattr(target, ANNOTATIONS_ATTRIBUTE, (annotation, *existing))


def declared_annotations(target: Any) -> tuple[Annotation, ...]:
    """Annotations attached directly to target (classes: not inherited)."""
    if isinstance(target, type):
        return tuple(vars(target).get(ANNOTATIONS_ATTRIBUTE, ()))
    return tuple(getattr(target, ANNOTATIONS_ATTRIBUTE, ()))


def annotated(*annotations: Annotation) -> Callable[[T], T]:
    """Attach ready-made annotation values, in the given order."""

    def decorator(target: T) -> T:
        for annotation in reversed(annotations):
            add_annotation(target, annotation)
        return target

    return decorator


def annotate(
    kind: str,
    *arguments: Any,
    category: AnnotationCategory = AnnotationCategory.DECLARATIVE,
) -> Callable[[T], T]:
    """Attach a generic marker (e.g. ``@annotate("deprecated", "use v2")``)."""
    return annotated(Annotation(kind=kind, category=category, arguments=arguments))


def authorize(
    policy: str | None = None, *, roles: Iterable[str] = ()
) -> Callable[[T], T]:
    """Mark a handler class or function as requiring authorization.

    Args:
        policy: Named access-control policy.
        roles: Accepted role names.
    """
    return annotated(AuthorizeAnnotation(policy=policy, roles=tuple(roles)))


def display_name(name: str) -> Callable[[T], T]:
    """Give a handler class or function a human-readable label."""
    return annotated(DisplayNameAnnotation(display_name=name))


def area(name: str) -> Callable[[T], T]:
    """Place a handler class in a named area."""
    return annotated(AreaAnnotation(area_name=name))
