"""Security classification for handler groups and actions.

Pure functions deciding whether a handler requires authorization. Only the
presence of an authorization annotation matters here; which policy it names
is the policy query's concern.

Rules:
    - A group is directly secured when its owning type carries an
      authorization annotation.
    - An action is secured when it carries one itself or its group does
      (one level of inheritance, group to action only).
    - A built group is secured when any type it was merged from is directly
      secured or any of its actions is secured.
"""

from collections.abc import Iterable

from route_catalog.domain.entities import HandlerAction
from route_catalog.domain.value_objects import MemberMetadata


def is_group_secured(group: MemberMetadata) -> bool:
    """Check whether a group-owning type declares authorization itself."""
    return group.is_authorized


def is_action_secured(group: MemberMetadata, action: MemberMetadata) -> bool:
    """Check whether an action requires authorization.

    Args:
        group: Metadata of the type that owns the action's group.
        action: Metadata of the action member.

    Returns:
        True when the action or its group carries an authorization annotation.
    """
    return action.is_authorized or group.is_authorized


def is_group_secured_with_actions(
    owners: Iterable[MemberMetadata], actions: Iterable[HandlerAction]
) -> bool:
    """Final group flag.

    Args:
        owners: Metadata of every type the group was built from.
        actions: The group's actions.

    Returns:
        True when any owner is directly secured or any action is secured.
    """
    return any(is_group_secured(owner) for owner in owners) or any(
        action.is_secured for action in actions
    )
