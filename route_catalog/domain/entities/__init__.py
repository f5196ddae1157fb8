"""Domain entities for the handler catalog.

Pure entities with no framework dependencies.
"""

from route_catalog.domain.entities.handler_action import HandlerAction, action_id_for
from route_catalog.domain.entities.handler_group import HandlerGroup, group_id_for

__all__ = [
    "HandlerAction",
    "HandlerGroup",
    "action_id_for",
    "group_id_for",
]
