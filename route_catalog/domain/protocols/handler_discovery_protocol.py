"""HandlerDiscoveryProtocol definition.

Read-only surface of the handler catalog, used by presentation code and by
anything that needs to list guarded handlers (permission editors, audits).

Usage:
    from route_catalog.domain.protocols import HandlerDiscoveryProtocol

    def admin_handlers(discovery: HandlerDiscoveryProtocol) -> list[str]:
        return [g.name for g in discovery.get_secured_controllers("Admin")]
"""

from collections.abc import Sequence
from typing import Protocol

from route_catalog.domain.entities import HandlerGroup


class HandlerDiscoveryProtocol(Protocol):
    """Protocol for the handler catalog query service."""

    @property
    def controllers(self) -> Sequence[HandlerGroup]:
        """Every handler group with all its actions, in discovery order."""
        ...

    @property
    def secured_controllers(self) -> Sequence[HandlerGroup]:
        """Secured groups, each restricted to its secured actions."""
        ...

    def get_secured_controllers(self, policy_name: str) -> list[HandlerGroup]:
        """Secured groups and actions guarded by the given policy.

        Args:
            policy_name: Policy to match (case-sensitive, literal).

        Returns:
            New list of new group values; empty when nothing matches.

        Raises:
            InvalidArgumentError: If policy_name is None.
        """
        ...

    def get_controller(self, name: str) -> HandlerGroup | None:
        """Find a group by name (case-insensitive)."""
        ...

    def policies(self) -> list[str]:
        """Sorted policy names declared anywhere in the catalog."""
        ...
