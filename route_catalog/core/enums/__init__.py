"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from route_catalog.core.enums import ErrorCode, Environment
"""

from route_catalog.core.enums.environment import Environment
from route_catalog.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
