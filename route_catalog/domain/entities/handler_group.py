"""Handler group domain entity.

A named collection of related actions (a controller, or every endpoint
sharing a route tag). Groups are immutable once built: filtered views are
derived with ``with_actions()``, which returns a new group.

Architecture:
    - Pure domain entity (no framework dependencies)
    - Frozen; actions held in a tuple
    - Invariants checked in __post_init__

Usage:
    from route_catalog.domain.entities import HandlerGroup, group_id_for

    group = HandlerGroup(
        id=group_id_for("orders"),
        name="orders",
        display_name="Orders",
        actions=(list_action, delete_action),
        is_secured=True,
    )
    secured_only = group.with_actions(a for a in group.actions if a.is_secured)
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from uuid import NAMESPACE_URL, UUID, uuid5

from route_catalog.core.errors import CatalogConsistencyError
from route_catalog.domain.entities.handler_action import HandlerAction
from route_catalog.domain.errors import CatalogError
from route_catalog.domain.value_objects import Annotation

HANDLER_GROUP_NAMESPACE = uuid5(NAMESPACE_URL, "urn:route-catalog:handler-group")


def group_id_for(name: str) -> UUID:
    """Derive the stable id of a handler group from its normalized name.

    Args:
        name: Lower-cased group name.

    Returns:
        Deterministic UUID, distinct for distinct names.
    """
    return uuid5(HANDLER_GROUP_NAMESPACE, name)


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerGroup:
    """Catalog entry for one handler group.

    Attributes:
        id: Stable identifier derived from the normalized name.
        name: Lower-cased group name, unique across the catalog.
        display_name: Explicit display label, else the original-cased name.
        area_name: Lower-cased area label, or None.
        attributes: Annotations on the group-owning type, tooling markers removed.
        is_secured: The group or any of its actions requires authorization.
        policy: Policy declared by the group's own authorization annotation.
        actions: Actions in descriptor encounter order.

    Raises:
        CatalogConsistencyError: If an action references another group or
            two actions share an id.
    """

    id: UUID
    name: str
    display_name: str
    area_name: str | None = None
    attributes: tuple[Annotation, ...] = ()
    is_secured: bool = False
    policy: str | None = None
    actions: tuple[HandlerAction, ...] = ()

    def __post_init__(self) -> None:
        """Validate action back-references and action id uniqueness."""
        seen: set[UUID] = set()
        for action in self.actions:
            if action.group_id != self.id:
                raise CatalogConsistencyError(
                    f"{CatalogError.ACTION_GROUP_MISMATCH}: {self.name}.{action.name}"
                )
            if action.id in seen:
                raise CatalogConsistencyError(
                    f"{CatalogError.DUPLICATE_ACTION_ID}: {self.name}.{action.name}"
                )
            seen.add(action.id)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def declares_policy(self, policy_name: str) -> bool:
        """Check whether the group's own authorization names policy_name."""
        return self.policy is not None and self.policy == policy_name

    def get_action(self, name: str) -> HandlerAction | None:
        """Find an action by name (case-insensitive).

        Args:
            name: Action name in any casing.

        Returns:
            The matching action, or None.
        """
        normalized = name.lower()
        for action in self.actions:
            if action.name == normalized:
                return action
        return None

    @property
    def secured_actions(self) -> tuple[HandlerAction, ...]:
        """Actions whose is_secured flag is set, in insertion order."""
        return tuple(action for action in self.actions if action.is_secured)

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def with_actions(self, actions: Iterable[HandlerAction]) -> "HandlerGroup":
        """Return a copy of this group holding only the given actions.

        The receiver is left untouched.

        Args:
            actions: Actions for the new group, all belonging to this group.

        Returns:
            New HandlerGroup instance.
        """
        return replace(self, actions=tuple(actions))
