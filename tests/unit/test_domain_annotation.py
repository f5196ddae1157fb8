"""Unit tests for annotation and metadata value objects.

Tests validation, defaults, immutability, and MemberMetadata accessors.
"""

from dataclasses import FrozenInstanceError

import pytest

from route_catalog.domain.enums import AnnotationCategory
from route_catalog.domain.value_objects import (
    Annotation,
    AreaAnnotation,
    AuthorizeAnnotation,
    DisplayNameAnnotation,
    MemberMetadata,
)


@pytest.mark.unit
class TestAnnotations:
    """Tests for annotation value objects."""

    def test_authorize_defaults(self) -> None:
        """Should default to kind 'authorize' in the AUTHORIZATION category."""
        annotation = AuthorizeAnnotation(policy="Admin", roles=("ops",))

        assert annotation.kind == "authorize"
        assert annotation.category is AnnotationCategory.AUTHORIZATION
        assert annotation.policy == "Admin"
        assert annotation.roles == ("ops",)

    def test_generic_annotation_is_declarative(self) -> None:
        """Should default generic markers to DECLARATIVE."""
        annotation = Annotation(kind="deprecated", arguments=("use v2",))

        assert annotation.category is AnnotationCategory.DECLARATIVE
        assert annotation.arguments == ("use v2",)

    def test_blank_kind_rejected(self) -> None:
        """Should reject an empty marker kind."""
        with pytest.raises(ValueError, match="Annotation kind cannot be empty"):
            Annotation(kind="  ")

    def test_blank_display_name_rejected(self) -> None:
        """Should reject an empty display name."""
        with pytest.raises(ValueError, match="Display name cannot be empty"):
            DisplayNameAnnotation(display_name="")

    def test_blank_area_rejected(self) -> None:
        """Should reject an empty area name."""
        with pytest.raises(ValueError, match="Area name cannot be empty"):
            AreaAnnotation(area_name=" ")

    def test_annotations_are_immutable(self) -> None:
        """Should not allow attribute assignment."""
        annotation = AuthorizeAnnotation(policy="Admin")

        with pytest.raises(FrozenInstanceError):
            annotation.policy = "Staff"  # type: ignore[misc]


@pytest.mark.unit
class TestMemberMetadata:
    """Tests for MemberMetadata accessors."""

    def test_empty_metadata(self) -> None:
        """Should report no authorization, display name, or area."""
        metadata = MemberMetadata(name="list")

        assert metadata.authorization is None
        assert metadata.is_authorized is False
        assert metadata.policy is None
        assert metadata.display_name is None
        assert metadata.area_name is None

    def test_first_authorization_wins(self) -> None:
        """Should read the policy of the first authorization annotation."""
        metadata = MemberMetadata(
            name="delete",
            annotations=(
                AuthorizeAnnotation(policy="Admin"),
                AuthorizeAnnotation(policy="Staff"),
            ),
        )

        assert metadata.is_authorized is True
        assert metadata.policy == "Admin"

    def test_authorization_without_policy(self) -> None:
        """Should be authorized even when no policy is named."""
        metadata = MemberMetadata(name="view", annotations=(AuthorizeAnnotation(),))

        assert metadata.is_authorized is True
        assert metadata.policy is None

    def test_display_and_area(self) -> None:
        """Should expose declared display and area labels unchanged."""
        metadata = MemberMetadata(
            name="UsersController",
            annotations=(
                AreaAnnotation(area_name="Admin"),
                DisplayNameAnnotation(display_name="User Management"),
            ),
        )

        assert metadata.display_name == "User Management"
        assert metadata.area_name == "Admin"

    def test_visible_annotations_filters_categories(self) -> None:
        """Should drop excluded categories and keep declaration order."""
        generated = Annotation(kind="wraps", category=AnnotationCategory.COMPILER_GENERATED)
        traced = Annotation(kind="trace", category=AnnotationCategory.DIAGNOSTIC)
        authorize = AuthorizeAnnotation(policy="Admin")
        deprecated = Annotation(kind="deprecated")
        metadata = MemberMetadata(
            name="delete", annotations=(generated, authorize, traced, deprecated)
        )

        visible = metadata.visible_annotations(
            {AnnotationCategory.COMPILER_GENERATED, AnnotationCategory.DIAGNOSTIC}
        )

        assert visible == (authorize, deprecated)
