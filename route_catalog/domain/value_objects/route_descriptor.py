"""Route descriptor value object.

One discovered route handler as handed to the catalog by a descriptor source.

Usage:
    from route_catalog.domain.value_objects import MemberMetadata, RouteDescriptor

    descriptor = RouteDescriptor(
        group_name="Orders",
        action_name="List",
        group=MemberMetadata(name="OrdersController"),
        action=MemberMetadata(name="list"),
    )
"""

from dataclasses import dataclass

from route_catalog.domain.value_objects.member_metadata import MemberMetadata


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteDescriptor:
    """Raw metadata for one discovered route handler.

    Descriptors are not validated on construction; the catalog builder
    checks every descriptor before building anything.

    Attributes:
        group_name: Name of the handler group (original casing).
        action_name: Name of the action (original casing).
        group: Metadata of the type that owns the group.
        action: Metadata of the action member.
    """

    group_name: str
    action_name: str
    group: MemberMetadata
    action: MemberMetadata
