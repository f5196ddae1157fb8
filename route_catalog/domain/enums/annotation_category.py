"""Annotation category enum.

Every annotation attached to a handler group or action carries a category.
The catalog builder uses categories to drop tooling-only markers from the
attribute list it exposes.

Categories:
    AUTHORIZATION: Access-control markers (authorize)
    DISPLAY: Human-readable labels (display_name)
    ROUTING: Grouping and routing hints (area)
    DECLARATIVE: Any other application-defined marker
    COMPILER_GENERATED: Markers produced by code generation or wrapping
    DIAGNOSTIC: Debugging and tracing markers
"""

from enum import Enum


class AnnotationCategory(str, Enum):
    """Category of a declarative handler annotation."""

    AUTHORIZATION = "authorization"
    DISPLAY = "display"
    ROUTING = "routing"
    DECLARATIVE = "declarative"
    COMPILER_GENERATED = "compiler_generated"
    DIAGNOSTIC = "diagnostic"
