"""Descriptor factories shared by catalog tests."""

from route_catalog.domain.value_objects import (
    Annotation,
    AuthorizeAnnotation,
    MemberMetadata,
    RouteDescriptor,
)


def make_descriptor(
    group: str,
    action: str,
    *,
    group_annotations: tuple[Annotation, ...] = (),
    action_annotations: tuple[Annotation, ...] = (),
) -> RouteDescriptor:
    """Build a descriptor with the given group/action annotations."""
    return RouteDescriptor(
        group_name=group,
        action_name=action,
        group=MemberMetadata(name=f"{group}Controller", annotations=group_annotations),
        action=MemberMetadata(name=action, annotations=action_annotations),
    )


def example_descriptors() -> list[RouteDescriptor]:
    """Orders (Delete guarded by Admin) and Users (group guarded by Staff)."""
    return [
        make_descriptor("Orders", "List"),
        make_descriptor(
            "Orders", "Delete", action_annotations=(AuthorizeAnnotation(policy="Admin"),)
        ),
        make_descriptor(
            "Users", "View", group_annotations=(AuthorizeAnnotation(policy="Staff"),)
        ),
    ]
