"""Domain enums.

Usage:
    from route_catalog.domain.enums import AnnotationCategory, DuplicateActionPolicy
"""

from route_catalog.domain.enums.annotation_category import AnnotationCategory
from route_catalog.domain.enums.duplicate_action_policy import DuplicateActionPolicy

__all__ = ["AnnotationCategory", "DuplicateActionPolicy"]
