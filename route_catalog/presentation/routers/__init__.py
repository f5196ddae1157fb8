"""HTTP routers."""

from route_catalog.presentation.routers.catalog import create_catalog_router

__all__ = ["create_catalog_router"]
