"""Handler action domain entity.

A single invocable operation within a handler group (a controller action or
an endpoint function).

Usage:
    from route_catalog.domain.entities import HandlerAction, action_id_for

    action = HandlerAction(
        id=action_id_for(group.id, "delete"),
        group_id=group.id,
        name="delete",
        display_name="Delete",
        is_secured=True,
        policy="Admin",
    )
    action.guarded_by("Admin")
"""

from dataclasses import dataclass
from uuid import UUID, uuid5

from route_catalog.domain.value_objects import Annotation


def action_id_for(group_id: UUID, name: str) -> UUID:
    """Derive the stable id of an action from its group id and name.

    Args:
        group_id: Id of the owning handler group.
        name: Normalized (lower-cased) action name.

    Returns:
        Deterministic UUID, unique per (group_id, name).
    """
    return uuid5(group_id, name)


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerAction:
    """Catalog entry for one action.

    Attributes:
        id: Stable identifier derived from (group_id, name).
        group_id: Id of the owning HandlerGroup (lookup only).
        name: Lower-cased action name.
        display_name: Explicit display label, else the original-cased name.
        attributes: Annotations on the action member, tooling markers removed.
        is_secured: Authorization declared on the action or inherited from its group.
        policy: Policy declared by the action's own authorization annotation.
        group_policy: Policy declared by the group-owning type the action was
            found on. Groups merged from several types keep this per action.
    """

    id: UUID
    group_id: UUID
    name: str
    display_name: str
    attributes: tuple[Annotation, ...] = ()
    is_secured: bool = False
    policy: str | None = None
    group_policy: str | None = None

    def declares_policy(self, policy_name: str) -> bool:
        """Check whether the action's own authorization names policy_name.

        Args:
            policy_name: Policy to compare, case-sensitive.

        Returns:
            True when the action declares exactly this policy.
        """
        return self.policy is not None and self.policy == policy_name

    def guarded_by(self, policy_name: str) -> bool:
        """Check whether policy_name guards this action, directly or via its type."""
        return self.declares_policy(policy_name) or (
            self.group_policy is not None and self.group_policy == policy_name
        )
