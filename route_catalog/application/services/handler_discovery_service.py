"""Handler discovery service.

Long-lived, read-only catalog of an application's route handlers, built once
from a descriptor snapshot and queried by any number of callers.

Architecture:
    - Application service, constructed explicitly (no global registration)
    - Catalog computed once in __init__ and never regenerated
    - Entities are frozen and held in tuples; queries return new lists, so
      concurrent readers need no locking

Usage:
    from route_catalog.application.services import HandlerDiscoveryService
    from route_catalog.infrastructure.discovery import ClassHandlerSource

    discovery = HandlerDiscoveryService(
        ClassHandlerSource(OrdersController, UsersController),
        logger=logger,
    )
    discovery.get_secured_controllers("Admin")
"""

from collections.abc import Sequence

from route_catalog.application.services.catalog_builder import (
    HandlerCatalogBuilder,
    project_secured,
)
from route_catalog.application.services.policy_query import filter_by_policy
from route_catalog.core.config import Settings, get_settings
from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.entities import HandlerGroup
from route_catalog.domain.errors import CatalogError
from route_catalog.domain.protocols import DescriptorSource, LoggerProtocol


class HandlerDiscoveryService:
    """Catalog of handler groups with security classification and policy queries.

    Implements HandlerDiscoveryProtocol.

    Dependencies (injected via constructor):
        - DescriptorSource: Snapshot of discovered route handlers
        - LoggerProtocol: Structured logging
        - Settings: Duplicate handling, attribute filtering, query behavior

    Example:
        >>> discovery = HandlerDiscoveryService(source, logger=logger)
        >>> [g.name for g in discovery.controllers]
        ['orders', 'users']
        >>> [a.name for a in discovery.secured_controllers[0].actions]
        ['delete']
    """

    def __init__(
        self,
        source: DescriptorSource,
        *,
        logger: LoggerProtocol,
        settings: Settings | None = None,
    ) -> None:
        """Build the catalog from the source's descriptor snapshot.

        Args:
            source: Descriptor source, read exactly once.
            logger: Structured logger.
            settings: Catalog settings. Defaults to the process settings.

        Raises:
            InvalidArgumentError: If source is None or its descriptors are invalid.
            CatalogConsistencyError: If a catalog invariant is violated.
        """
        if source is None:
            raise InvalidArgumentError("source", CatalogError.SOURCE_REQUIRED)

        settings = settings or get_settings()
        self._logger = logger.bind(component="handler_discovery")
        self._include_unmatched = settings.catalog_include_unmatched_groups

        builder = HandlerCatalogBuilder(
            logger=self._logger,
            excluded_categories=settings.catalog_excluded_annotation_categories,
            duplicate_policy=settings.catalog_duplicate_actions,
        )
        self._controllers = builder.build(source.get_descriptors())
        self._secured_controllers = project_secured(self._controllers)
        self._by_name = {group.name: group for group in self._controllers}

        self._logger.info(
            "handler_catalog_built",
            groups=len(self._controllers),
            actions=sum(len(group.actions) for group in self._controllers),
            secured_groups=len(self._secured_controllers),
            secured_actions=sum(len(g.actions) for g in self._secured_controllers),
        )

    @property
    def controllers(self) -> Sequence[HandlerGroup]:
        """Every handler group with all its actions, in discovery order."""
        return self._controllers

    @property
    def secured_controllers(self) -> Sequence[HandlerGroup]:
        """Secured groups, each restricted to its secured actions."""
        return self._secured_controllers

    def get_secured_controllers(self, policy_name: str) -> list[HandlerGroup]:
        """Secured groups and actions guarded by policy_name.

        Args:
            policy_name: Policy to match (literal, case-sensitive).

        Returns:
            New list of new group values; empty when nothing matches.

        Raises:
            InvalidArgumentError: If policy_name is None.
        """
        groups = filter_by_policy(
            self._secured_controllers,
            policy_name,
            include_unmatched=self._include_unmatched,
        )
        self._logger.debug(
            "policy_query",
            policy=policy_name,
            groups=len(groups),
        )
        return groups

    def get_controller(self, name: str) -> HandlerGroup | None:
        """Find a handler group by name (case-insensitive).

        Args:
            name: Group name in any casing.

        Returns:
            The group with all its actions, or None.

        Raises:
            InvalidArgumentError: If name is None.
        """
        if name is None:
            raise InvalidArgumentError("name")
        return self._by_name.get(name.lower())

    def policies(self) -> list[str]:
        """Sorted policy names declared by any group or action."""
        names: set[str] = set()
        for group in self._controllers:
            if group.policy is not None:
                names.add(group.policy)
            for action in group.actions:
                declared = (action.policy, action.group_policy)
                names.update(p for p in declared if p is not None)
        return sorted(names)
