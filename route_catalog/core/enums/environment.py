"""Runtime environments.

Settings reads ENVIRONMENT into this enum; the logger container reads it through
Settings.is_development to choose between console and JSON rendering.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the catalog is running."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
