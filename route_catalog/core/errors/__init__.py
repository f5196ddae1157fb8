"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from route_catalog.core.errors import DomainError, NotFoundError
"""

from route_catalog.core.errors.common_errors import (
    CatalogConsistencyError,
    ConversionError,
    InvalidArgumentError,
    NotFoundError,
)
from route_catalog.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConversionError",
    "InvalidArgumentError",
    "CatalogConsistencyError",
]
