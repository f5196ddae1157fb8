"""Handler catalog response schemas.

Pydantic schemas for the catalog HTTP views, with entity-to-schema
conversion methods.
"""

from dataclasses import fields
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from route_catalog.domain.entities import HandlerAction, HandlerGroup
from route_catalog.domain.value_objects import Annotation


# =============================================================================
# Response Schemas
# =============================================================================


class AnnotationResponse(BaseModel):
    """Annotation attached to a group or action.

    Attributes:
        kind: Marker name (e.g. "authorize").
        category: Annotation category.
        values: Marker-specific values (policy, roles, display_name, ...).
    """

    kind: str = Field(..., description="Marker name", examples=["authorize"])
    category: str = Field(..., description="Annotation category")
    values: dict[str, Any] = Field(
        default_factory=dict,
        description="Marker-specific values",
        examples=[{"policy": "Admin", "roles": []}],
    )

    @classmethod
    def from_annotation(cls, annotation: Annotation) -> "AnnotationResponse":
        """Convert an annotation value object to its response schema."""
        values: dict[str, Any] = {}
        for item in fields(annotation):
            if item.name in ("kind", "category"):
                continue
            value = getattr(annotation, item.name)
            if value is None or (isinstance(value, tuple) and not value):
                continue
            values[item.name] = _jsonable(value)
        return cls(
            kind=annotation.kind,
            category=annotation.category.value,
            values=values,
        )


class HandlerActionResponse(BaseModel):
    """Single action of a handler group."""

    id: UUID = Field(..., description="Stable action identifier")
    group_id: UUID = Field(..., description="Owning group identifier")
    name: str = Field(..., description="Lower-cased action name", examples=["delete"])
    display_name: str = Field(..., description="Human-readable label")
    is_secured: bool = Field(..., description="Whether authorization is required")
    policy: str | None = Field(None, description="Policy declared by the action")
    group_policy: str | None = Field(
        None, description="Policy declared by the type the action was found on"
    )
    attributes: list[AnnotationResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, action: HandlerAction) -> "HandlerActionResponse":
        """Convert a HandlerAction entity to its response schema."""
        return cls(
            id=action.id,
            group_id=action.group_id,
            name=action.name,
            display_name=action.display_name,
            is_secured=action.is_secured,
            policy=action.policy,
            group_policy=action.group_policy,
            attributes=[AnnotationResponse.from_annotation(a) for a in action.attributes],
        )


class HandlerGroupResponse(BaseModel):
    """Handler group with its actions."""

    id: UUID = Field(..., description="Stable group identifier")
    name: str = Field(..., description="Lower-cased group name", examples=["orders"])
    display_name: str = Field(..., description="Human-readable label")
    area_name: str | None = Field(None, description="Lower-cased area label")
    is_secured: bool = Field(..., description="Whether any handler requires authorization")
    policy: str | None = Field(None, description="Policy declared by the group")
    attributes: list[AnnotationResponse] = Field(default_factory=list)
    actions: list[HandlerActionResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, group: HandlerGroup) -> "HandlerGroupResponse":
        """Convert a HandlerGroup entity to its response schema."""
        return cls(
            id=group.id,
            name=group.name,
            display_name=group.display_name,
            area_name=group.area_name,
            is_secured=group.is_secured,
            policy=group.policy,
            attributes=[AnnotationResponse.from_annotation(a) for a in group.attributes],
            actions=[HandlerActionResponse.from_entity(a) for a in group.actions],
        )


class HandlerCatalogResponse(BaseModel):
    """List of handler groups with totals."""

    groups: list[HandlerGroupResponse] = Field(..., description="Handler groups")
    total_groups: int = Field(..., description="Number of groups")
    total_actions: int = Field(..., description="Number of actions across groups")

    @classmethod
    def from_entities(cls, groups: list[HandlerGroup]) -> "HandlerCatalogResponse":
        """Convert a list of groups to the catalog response."""
        return cls(
            groups=[HandlerGroupResponse.from_entity(g) for g in groups],
            total_groups=len(groups),
            total_actions=sum(len(g.actions) for g in groups),
        )


class PolicyListResponse(BaseModel):
    """Policy names declared in the catalog."""

    policies: list[str] = Field(..., description="Sorted policy names")
    total: int = Field(..., description="Number of policies")


def _jsonable(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
