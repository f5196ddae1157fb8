"""Extract MemberMetadata from live Python objects.

This is the only place that inspects classes and functions; the catalog
itself works on the extracted MemberMetadata values.

Rules:
    - Classes: annotations of the class, then of its bases (MRO order),
      so a controller inherits the markers of a secured base controller.
    - Functions: annotations attached to the function. ``functools.wraps``
      copies them to the wrapper. A wrapper also gets a COMPILER_GENERATED
      "wraps" marker naming the wrapped function.
"""

import inspect
from typing import Any

from route_catalog.domain.enums import AnnotationCategory
from route_catalog.domain.value_objects import Annotation, MemberMetadata
from route_catalog.infrastructure.discovery.annotations import declared_annotations


def class_annotations(cls: type) -> tuple[Annotation, ...]:
    """Annotations of a class and its bases, most-derived first."""
    collected: list[Annotation] = []
    for klass in inspect.getmro(cls):
        if klass is object:
            continue
        collected.extend(declared_annotations(klass))
    return tuple(collected)


def function_annotations(func: Any) -> tuple[Annotation, ...]:
    """Annotations of a function, plus a marker when it is a wrapper."""
    annotations = declared_annotations(func)
    wrapped = getattr(func, "__wrapped__", None)
    if wrapped is not None:
        marker = Annotation(
            kind="wraps",
            category=AnnotationCategory.COMPILER_GENERATED,
            arguments=(getattr(wrapped, "__qualname__", repr(wrapped)),),
        )
        annotations = (*annotations, marker)
    return annotations


def member_metadata_for(target: Any, name: str | None = None) -> MemberMetadata:
    """Build MemberMetadata for a handler class or function.

    Args:
        target: Class or function.
        name: Name to record; defaults to the target's ``__name__``.

    Returns:
        Extracted metadata.
    """
    if isinstance(target, type):
        annotations = class_annotations(target)
    else:
        annotations = function_annotations(target)
    return MemberMetadata(
        name=name or getattr(target, "__name__", repr(target)),
        annotations=annotations,
    )
