"""Policy query over the secured handler catalog.

Answers "which secured handlers are guarded by policy P". Matching compares
the policy declared by the first authorization annotation of the action, or
of the type it was found on, with the requested name. Matching is literal
and case-sensitive.

Every call builds new group values; the catalog passed in is never modified,
so concurrent queries for different policies do not interfere.
"""

from collections.abc import Sequence

from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.entities import HandlerGroup
from route_catalog.domain.errors import CatalogError


def filter_by_policy(
    secured_groups: Sequence[HandlerGroup],
    policy_name: str,
    *,
    include_unmatched: bool = False,
) -> list[HandlerGroup]:
    """Restrict secured groups to the actions guarded by policy_name.

    An action is kept when it declares policy_name itself or the type it was
    found on does (see HandlerAction.guarded_by).
    A group with no kept action is dropped unless the group itself declares
    the policy or include_unmatched is set.

    Args:
        secured_groups: Secured projection of the catalog.
        policy_name: Policy to match. Empty string is matched literally.
        include_unmatched: Keep every secured group, even with no match.

    Returns:
        New list of new groups, in catalog order.

    Raises:
        InvalidArgumentError: If policy_name is None.

    Example:
        >>> [g.name for g in filter_by_policy(secured, "Admin")]
        ['orders']
    """
    if policy_name is None:
        raise InvalidArgumentError("policy_name", CatalogError.POLICY_NAME_REQUIRED)

    matched: list[HandlerGroup] = []
    for group in secured_groups:
        group_matches = group.declares_policy(policy_name)
        actions = [
            action for action in group.actions if action.guarded_by(policy_name)
        ]
        if actions or group_matches or include_unmatched:
            matched.append(group.with_actions(actions))

    return matched
