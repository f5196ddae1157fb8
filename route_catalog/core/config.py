"""
Catalog settings, read from environment variables with pydantic-settings.

One flat model covers logging and the catalog switches (the `catalog_`
fields). Names are matched case-insensitively; unknown variables are ignored.

Usage:
    from route_catalog.core.config import settings

    if settings.catalog_duplicate_actions is DuplicateActionPolicy.REJECT:
        ...
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from route_catalog.core.enums import Environment
from route_catalog.domain.enums import AnnotationCategory, DuplicateActionPolicy

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Process-wide settings.

    Values come from environment variables, falling back to the defaults below.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment; selects console or JSON logs",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum log level name",
    )

    app_name: str = Field(
        default="route-catalog",
        description="Bound to every log event as app",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Bound to every log event as version",
    )

    # Catalog behavior
    catalog_duplicate_actions: DuplicateActionPolicy = Field(
        default=DuplicateActionPolicy.IGNORE,
        description="What to do with a second action of the same id in a group "
        "(ignore keeps the first one, reject aborts the build)",
    )
    catalog_include_unmatched_groups: bool = Field(
        default=False,
        description="Return every secured group from policy queries, even when "
        "neither the group nor any of its actions declares the policy",
    )
    catalog_excluded_annotation_categories: Annotated[
        list[AnnotationCategory], NoDecode
    ] = Field(
        default=[
            AnnotationCategory.COMPILER_GENERATED,
            AnnotationCategory.DIAGNOSTIC,
        ],
        description="Comma-separated annotation categories hidden from attribute lists",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("catalog_excluded_annotation_categories", mode="before")
    @classmethod
    def parse_excluded_categories(
        cls, v: str | list[str] | list[AnnotationCategory]
    ) -> list[str] | list[AnnotationCategory]:
        """Parse comma-separated category names from the environment."""
        if isinstance(v, str):
            return [item.strip().lower() for item in v.split(",") if item.strip()]
        return v

    @property
    def is_development(self) -> bool:
        """Local development (console logs)."""
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Deployed production environment."""
        return self.environment is Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process (call cache_clear() to reload)."""
    return Settings()


settings = get_settings()
