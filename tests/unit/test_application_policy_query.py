"""Unit tests for the policy query engine."""

import pytest

from route_catalog.application.services.catalog_builder import (
    HandlerCatalogBuilder,
    project_secured,
)
from route_catalog.application.services.policy_query import filter_by_policy
from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.value_objects import AuthorizeAnnotation
from tests.utils.descriptors import example_descriptors, make_descriptor


@pytest.fixture
def secured(mock_logger):
    """Secured projection of the example plus a mixed Reports group."""
    descriptors = [
        *example_descriptors(),
        make_descriptor(
            "Reports", "Daily", action_annotations=(AuthorizeAnnotation(policy="Admin"),)
        ),
        make_descriptor(
            "Reports", "Export", action_annotations=(AuthorizeAnnotation(policy="Staff"),)
        ),
        make_descriptor("Reports", "Audit", action_annotations=(AuthorizeAnnotation(),)),
    ]
    return project_secured(HandlerCatalogBuilder(logger=mock_logger).build(descriptors))


@pytest.mark.unit
class TestFilterByPolicy:
    """Tests for filter_by_policy."""

    def test_action_policy_match(self, secured) -> None:
        groups = filter_by_policy(secured, "Admin")

        assert [g.name for g in groups] == ["orders", "reports"]
        assert [a.name for a in groups[0].actions] == ["delete"]
        assert [a.name for a in groups[1].actions] == ["daily"]

    def test_group_policy_covers_all_actions(self, secured) -> None:
        groups = filter_by_policy(secured, "Staff")

        assert [g.name for g in groups] == ["users", "reports"]
        assert [a.name for a in groups[0].actions] == ["view"]
        assert [a.name for a in groups[1].actions] == ["export"]

    def test_matching_is_case_sensitive(self, secured) -> None:
        assert filter_by_policy(secured, "admin") == []

    def test_unknown_policy_returns_empty_list(self, secured) -> None:
        assert filter_by_policy(secured, "Auditor") == []

    def test_empty_policy_is_matched_literally(self, secured) -> None:
        """Authorization without a policy does not match the empty string."""
        assert filter_by_policy(secured, "") == []

    def test_none_policy_raises(self, secured) -> None:
        with pytest.raises(InvalidArgumentError, match="Policy name cannot be None"):
            filter_by_policy(secured, None)

    def test_include_unmatched_keeps_every_secured_group(self, secured) -> None:
        groups = filter_by_policy(secured, "Admin", include_unmatched=True)

        assert [g.name for g in groups] == ["orders", "users", "reports"]
        assert groups[1].actions == ()

    def test_input_not_modified(self, secured) -> None:
        before = [(g.name, tuple(a.name for a in g.actions)) for g in secured]

        filter_by_policy(secured, "Admin")

        assert [(g.name, tuple(a.name for a in g.actions)) for g in secured] == before

    def test_group_policy_without_secured_actions_is_kept(self, mock_logger) -> None:
        """A group declaring the policy is returned even with no actions."""
        builder = HandlerCatalogBuilder(logger=mock_logger)
        groups = builder.build(
            [
                make_descriptor(
                    "Users", "View", group_annotations=(AuthorizeAnnotation(policy="Staff"),)
                )
            ]
        )
        empty = [groups[0].with_actions(())]

        result = filter_by_policy(empty, "Staff")

        assert [g.name for g in result] == ["users"]
        assert result[0].actions == ()

    def test_empty_policy_name_matches_empty_declaration(self, mock_logger) -> None:
        """An empty policy declaration is found by an empty-string query."""
        builder = HandlerCatalogBuilder(logger=mock_logger)
        groups = builder.build(
            [
                make_descriptor(
                    "Orders", "Delete", action_annotations=(AuthorizeAnnotation(policy=""),)
                ),
                make_descriptor("Orders", "Archive", action_annotations=(AuthorizeAnnotation(),)),
            ]
        )

        result = filter_by_policy(project_secured(groups), "")

        assert [(g.name, [a.name for a in g.actions]) for g in result] == [
            ("orders", ["delete"])
        ]

    def test_merged_group_matches_per_owning_type(self, mock_logger) -> None:
        """Actions of a merged group match only the policy of their own type."""
        builder = HandlerCatalogBuilder(logger=mock_logger)
        secured = project_secured(
            builder.build(
                [
                    make_descriptor(
                        "Reports", "Export", group_annotations=(AuthorizeAnnotation(policy="Staff"),)
                    ),
                    make_descriptor(
                        "Reports", "Purge", group_annotations=(AuthorizeAnnotation(policy="Admin"),)
                    ),
                ]
            )
        )

        staff = filter_by_policy(secured, "Staff")
        admin = filter_by_policy(secured, "Admin")

        assert [a.name for a in staff[0].actions] == ["export"]
        assert [(g.name, [a.name for a in g.actions]) for g in admin] == [
            ("reports", ["purge"])
        ]
