"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log level, catalog switches)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from route_catalog.core.config import Settings, get_settings
from route_catalog.core.enums import Environment
from route_catalog.domain.enums import AnnotationCategory, DuplicateActionPolicy


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values with an empty environment."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.app_name == "route-catalog"
        assert settings.catalog_duplicate_actions is DuplicateActionPolicy.IGNORE
        assert settings.catalog_include_unmatched_groups is False
        assert settings.catalog_excluded_annotation_categories == [
            AnnotationCategory.COMPILER_GENERATED,
            AnnotationCategory.DIAGNOSTIC,
        ]

    def test_is_development(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

        assert settings.is_development is True
        assert settings.is_production is False


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_catalog_switches(self):
        env_values = {
            "ENVIRONMENT": "production",
            "CATALOG_DUPLICATE_ACTIONS": "reject",
            "CATALOG_INCLUDE_UNMATCHED_GROUPS": "true",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = get_settings()

        assert settings.is_production is True
        assert settings.catalog_duplicate_actions is DuplicateActionPolicy.REJECT
        assert settings.catalog_include_unmatched_groups is True

    def test_excluded_categories_comma_separated(self):
        env_values = {"CATALOG_EXCLUDED_ANNOTATION_CATEGORIES": "Diagnostic, declarative"}
        with patch.dict(os.environ, env_values, clear=True):
            settings = get_settings()

        assert settings.catalog_excluded_annotation_categories == [
            AnnotationCategory.DIAGNOSTIC,
            AnnotationCategory.DECLARATIVE,
        ]

    def test_excluded_categories_empty(self):
        with patch.dict(
            os.environ, {"CATALOG_EXCLUDED_ANNOTATION_CATEGORIES": ""}, clear=True
        ):
            settings = get_settings()

        assert settings.catalog_excluded_annotation_categories == []

    def test_unknown_category_rejected(self):
        with patch.dict(
            os.environ, {"CATALOG_EXCLUDED_ANNOTATION_CATEGORIES": "sparkles"}, clear=True
        ):
            with pytest.raises(ValidationError):
                get_settings()

    def test_case_insensitive_names(self):
        with patch.dict(os.environ, {"log_level": "debug"}, clear=True):
            settings = get_settings()

        assert settings.log_level == "DEBUG"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    @pytest.mark.parametrize("level", ["warning", " ERROR ", "Critical"])
    def test_log_level_normalized(self, level):
        assert Settings(log_level=level).log_level == level.strip().upper()

    def test_log_level_invalid(self):
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="VERBOSE")

    def test_unknown_duplicate_policy(self):
        with pytest.raises(ValidationError):
            Settings(catalog_duplicate_actions="merge")


@pytest.mark.unit
class TestGetSettings:
    """Test cached singleton behavior."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        with patch.dict(os.environ, {"APP_NAME": "first"}, clear=True):
            first = get_settings()
        get_settings.cache_clear()
        with patch.dict(os.environ, {"APP_NAME": "second"}, clear=True):
            second = get_settings()

        assert first.app_name == "first"
        assert second.app_name == "second"
