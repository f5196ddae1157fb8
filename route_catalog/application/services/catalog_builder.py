"""Handler catalog builder.

Turns an ordered sequence of route descriptors into immutable HandlerGroup
records, each owning its HandlerAction records.

Architecture:
    - Application service (pure, no I/O)
    - Validates every descriptor before building anything
    - Groups explicitly by normalized group name (first-seen order), so
      descriptors of one group do not need to be contiguous
    - Display name, area and attributes come from the first descriptor of a
      group; security and policy are read from every type merged into it
    - Classifies security via security_classifier

Usage:
    builder = HandlerCatalogBuilder(logger=logger)
    groups = builder.build(source.get_descriptors())
    secured = project_secured(groups)
"""

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field
from uuid import UUID

from route_catalog.application.services.security_classifier import (
    is_action_secured,
    is_group_secured_with_actions,
)
from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.entities import (
    HandlerAction,
    HandlerGroup,
    action_id_for,
    group_id_for,
)
from route_catalog.domain.enums import AnnotationCategory, DuplicateActionPolicy
from route_catalog.domain.errors import CatalogError
from route_catalog.domain.protocols import LoggerProtocol
from route_catalog.domain.value_objects import MemberMetadata, RouteDescriptor

DEFAULT_EXCLUDED_CATEGORIES: frozenset[AnnotationCategory] = frozenset(
    {AnnotationCategory.COMPILER_GENERATED, AnnotationCategory.DIAGNOSTIC}
)


@dataclass(slots=True, kw_only=True)
class _GroupDraft:
    """Mutable group under construction; frozen into HandlerGroup at the end.

    ``owners`` holds the metadata of every group-owning type that contributed
    an action, first one first.
    """

    id: UUID
    name: str
    display_name: str
    metadata: MemberMetadata
    area_name: str | None
    owners: list[MemberMetadata] = field(default_factory=list)
    actions: list[HandlerAction] = field(default_factory=list)
    action_ids: set[UUID] = field(default_factory=set)


class HandlerCatalogBuilder:
    """Builds the handler catalog from route descriptors.

    Dependencies (injected via constructor):
        - LoggerProtocol: Build summary and skipped duplicates

    Example:
        >>> builder = HandlerCatalogBuilder(logger=logger)
        >>> groups = builder.build(descriptors)
        >>> [g.name for g in groups]
        ['orders', 'users']
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        excluded_categories: Collection[AnnotationCategory] = DEFAULT_EXCLUDED_CATEGORIES,
        duplicate_policy: DuplicateActionPolicy = DuplicateActionPolicy.IGNORE,
    ) -> None:
        """Initialize builder.

        Args:
            logger: Structured logger.
            excluded_categories: Annotation categories hidden from attributes.
            duplicate_policy: Whether duplicate actions are skipped or rejected.
        """
        self._logger = logger
        self._excluded = frozenset(excluded_categories)
        self._duplicate_policy = duplicate_policy

    def build(self, descriptors: Iterable[RouteDescriptor]) -> tuple[HandlerGroup, ...]:
        """Build handler groups from descriptors.

        Args:
            descriptors: Descriptors in discovery order.

        Returns:
            Groups in first-seen order, actions in encounter order.

        Raises:
            InvalidArgumentError: If descriptors is None, a descriptor is
                malformed, or a duplicate action is found under the REJECT policy.
            CatalogConsistencyError: If a built group violates its invariants.
        """
        if descriptors is None:
            raise InvalidArgumentError("descriptors", CatalogError.DESCRIPTORS_REQUIRED)

        snapshot = list(descriptors)
        for index, descriptor in enumerate(snapshot):
            _validate_descriptor(descriptor, index)

        drafts: dict[str, _GroupDraft] = {}
        for descriptor in snapshot:
            group_name = descriptor.group_name.lower()
            draft = drafts.get(group_name)
            if draft is None:
                draft = self._start_group(descriptor)
                drafts[group_name] = draft

            action = self._build_action(draft, descriptor)
            if action.id in draft.action_ids:
                self._on_duplicate(draft, action)
                continue

            draft.actions.append(action)
            draft.action_ids.add(action.id)
            if not any(owner is descriptor.group for owner in draft.owners):
                draft.owners.append(descriptor.group)

        return tuple(self._freeze(draft) for draft in drafts.values())

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _start_group(self, descriptor: RouteDescriptor) -> _GroupDraft:
        name = descriptor.group_name.lower()
        area_name = descriptor.group.area_name
        return _GroupDraft(
            id=group_id_for(name),
            name=name,
            display_name=descriptor.group.display_name or descriptor.group_name,
            metadata=descriptor.group,
            area_name=area_name.lower() if area_name is not None else None,
        )

    def _build_action(
        self, draft: _GroupDraft, descriptor: RouteDescriptor
    ) -> HandlerAction:
        name = descriptor.action_name.lower()
        return HandlerAction(
            id=action_id_for(draft.id, name),
            group_id=draft.id,
            name=name,
            display_name=descriptor.action.display_name or descriptor.action_name,
            attributes=descriptor.action.visible_annotations(self._excluded),
            is_secured=is_action_secured(descriptor.group, descriptor.action),
            policy=descriptor.action.policy,
            group_policy=descriptor.group.policy,
        )

    def _on_duplicate(self, draft: _GroupDraft, action: HandlerAction) -> None:
        if self._duplicate_policy is DuplicateActionPolicy.REJECT:
            raise InvalidArgumentError(
                "descriptors",
                f"{CatalogError.DUPLICATE_ACTION_ID}: {draft.name}.{action.name}",
            )
        self._logger.debug(
            "duplicate_action_skipped",
            group=draft.name,
            action=action.name,
        )

    def _freeze(self, draft: _GroupDraft) -> HandlerGroup:
        return HandlerGroup(
            id=draft.id,
            name=draft.name,
            display_name=draft.display_name,
            area_name=draft.area_name,
            attributes=draft.metadata.visible_annotations(self._excluded),
            is_secured=is_group_secured_with_actions(draft.owners, draft.actions),
            policy=next(
                (owner.policy for owner in draft.owners if owner.policy is not None),
                None,
            ),
            actions=tuple(draft.actions),
        )


def project_secured(groups: Sequence[HandlerGroup]) -> tuple[HandlerGroup, ...]:
    """Secured groups, each restricted to its secured actions.

    Returns new group values; the given groups are not modified.

    Args:
        groups: Canonical catalog groups.

    Returns:
        Secured projection in catalog order.
    """
    return tuple(
        group.with_actions(group.secured_actions) for group in groups if group.is_secured
    )


def _validate_descriptor(descriptor: RouteDescriptor | None, index: int) -> None:
    """Reject malformed descriptors before any group is built.

    Raises:
        InvalidArgumentError: If the descriptor or a required field is missing.
    """
    if descriptor is None:
        raise InvalidArgumentError(
            "descriptors", f"{CatalogError.DESCRIPTOR_REQUIRED} (index {index})"
        )
    if not isinstance(descriptor.group_name, str) or not descriptor.group_name.strip():
        raise InvalidArgumentError(
            "group_name", f"{CatalogError.GROUP_NAME_REQUIRED} (index {index})"
        )
    if not isinstance(descriptor.action_name, str) or not descriptor.action_name.strip():
        raise InvalidArgumentError(
            "action_name", f"{CatalogError.ACTION_NAME_REQUIRED} (index {index})"
        )
    if descriptor.group is None or descriptor.action is None:
        raise InvalidArgumentError(
            "metadata", f"{CatalogError.METADATA_REQUIRED} (index {index})"
        )
