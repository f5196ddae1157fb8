"""Domain error constants.

Usage:
    from route_catalog.domain.errors import CatalogError
"""

from route_catalog.domain.errors.catalog_error import CatalogError

__all__ = ["CatalogError"]
