"""Handler catalog router.

Read-only JSON views over a HandlerDiscoveryService.

Endpoints:
    GET /catalog/handlers                          → full catalog
    GET /catalog/handlers/secured                  → secured projection
    GET /catalog/handlers/{name}                   → one group (404 when missing)
    GET /catalog/policies                          → declared policy names
    GET /catalog/policies/{policy_name}/handlers   → groups guarded by a policy

Usage:
    discovery = build_handler_discovery_service(FastAPIRouteSource(app))
    app.include_router(create_catalog_router(discovery))
"""

from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import JSONResponse

from route_catalog.core.enums import ErrorCode
from route_catalog.core.errors import NotFoundError
from route_catalog.core.result import Failure, Result, Success
from route_catalog.domain.entities import HandlerGroup
from route_catalog.domain.errors import CatalogError
from route_catalog.domain.protocols import HandlerDiscoveryProtocol
from route_catalog.presentation.routers.errors import ErrorResponseBuilder, ProblemDetails
from route_catalog.schemas.catalog_schemas import (
    HandlerCatalogResponse,
    HandlerGroupResponse,
    PolicyListResponse,
)


def find_group(
    discovery: HandlerDiscoveryProtocol, name: str
) -> Result[HandlerGroup, NotFoundError]:
    """Look up a handler group by name.

    Args:
        discovery: Catalog to search.
        name: Group name in any casing.

    Returns:
        Success(HandlerGroup) when found, Failure(NotFoundError) otherwise.
    """
    group = discovery.get_controller(name)
    if group is None:
        return Failure(
            error=NotFoundError(
                code=ErrorCode.HANDLER_GROUP_NOT_FOUND,
                message=f"{CatalogError.GROUP_NOT_FOUND}: {name}",
                resource_type="HandlerGroup",
                resource_id=name,
            )
        )
    return Success(value=group)


def create_catalog_router(
    discovery: HandlerDiscoveryProtocol,
    *,
    prefix: str = "/catalog",
    tags: list[str] | None = None,
) -> APIRouter:
    """Create the catalog router bound to a discovery service.

    Args:
        discovery: Catalog served by the router.
        prefix: URL prefix for all catalog views.
        tags: OpenAPI tags. Defaults to ["Catalog"].

    Returns:
        APIRouter ready to include in an application.
    """
    router = APIRouter(prefix=prefix, tags=tags or ["Catalog"])

    @router.get(
        "/handlers",
        response_model=HandlerCatalogResponse,
        summary="List handler groups",
        operation_id="list_handler_groups",
    )
    def list_handler_groups() -> HandlerCatalogResponse:
        """GET /catalog/handlers → 200 OK"""
        return HandlerCatalogResponse.from_entities(list(discovery.controllers))

    @router.get(
        "/handlers/secured",
        response_model=HandlerCatalogResponse,
        summary="List secured handler groups",
        operation_id="list_secured_handler_groups",
    )
    def list_secured_handler_groups() -> HandlerCatalogResponse:
        """GET /catalog/handlers/secured → 200 OK"""
        return HandlerCatalogResponse.from_entities(list(discovery.secured_controllers))

    @router.get(
        "/handlers/{name}",
        response_model=HandlerGroupResponse,
        responses={404: {"model": ProblemDetails, "description": "Group not found"}},
        summary="Get handler group",
        operation_id="get_handler_group",
    )
    def get_handler_group(
        request: Request,
        name: Annotated[str, Path(description="Group name (case-insensitive)")],
    ) -> HandlerGroupResponse | JSONResponse:
        """GET /catalog/handlers/{name} → 200 OK / 404 Not Found"""
        result = find_group(discovery, name)
        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_domain_error(result.error, request)
        return HandlerGroupResponse.from_entity(result.value)

    @router.get(
        "/policies",
        response_model=PolicyListResponse,
        summary="List declared policies",
        operation_id="list_policies",
    )
    def list_policies() -> PolicyListResponse:
        """GET /catalog/policies → 200 OK"""
        policies = discovery.policies()
        return PolicyListResponse(policies=policies, total=len(policies))

    @router.get(
        "/policies/{policy_name}/handlers",
        response_model=HandlerCatalogResponse,
        summary="List handler groups guarded by a policy",
        operation_id="list_policy_handler_groups",
    )
    def list_policy_handler_groups(
        policy_name: Annotated[str, Path(description="Policy name (case-sensitive)")],
    ) -> HandlerCatalogResponse:
        """GET /catalog/policies/{policy_name}/handlers → 200 OK"""
        return HandlerCatalogResponse.from_entities(
            discovery.get_secured_controllers(policy_name)
        )

    return router
