"""Descriptor source for FastAPI route tables.

Reads the ``APIRoute`` entries of a FastAPI application or ``APIRouter``.
Routers added with ``include_router`` are read too, whether FastAPI copied
their routes into the parent or keeps them behind an included-router entry
(exposing ``original_router``).

Mapping:
    group: the route's first tag; untagged routes fall back to the last
        segment of the endpoint's module (``app.routers.orders`` -> ``orders``)
    action: the route name (the endpoint function name unless overridden)
    group metadata: annotations registered for the group in
        ``group_annotations`` (keyed by tag / group name as declared)
    action metadata: annotations attached to the endpoint with the
        decorators from ``annotations``

Usage:
    source = FastAPIRouteSource(
        app,
        group_annotations={"Admin": [AuthorizeAnnotation(policy="Admin")]},
    )
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import Enum

from fastapi import APIRouter, FastAPI
from fastapi.routing import APIRoute

from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.value_objects import (
    Annotation,
    MemberMetadata,
    RouteDescriptor,
)
from route_catalog.infrastructure.discovery.introspection import member_metadata_for


class FastAPIRouteSource:
    """Reads route descriptors from a FastAPI app or router.

    Implements DescriptorSource. Routes are read in registration order;
    routes sharing a tag need not be registered next to each other.
    """

    def __init__(
        self,
        app: FastAPI | APIRouter,
        *,
        group_annotations: Mapping[str, Sequence[Annotation]] | None = None,
    ) -> None:
        """Initialize source.

        Args:
            app: FastAPI application or router whose routes are read.
            group_annotations: Group-level annotations keyed by group name.

        Raises:
            InvalidArgumentError: If app is None.
        """
        if app is None:
            raise InvalidArgumentError("app")
        self._app = app
        self._group_annotations = {
            name: tuple(annotations)
            for name, annotations in (group_annotations or {}).items()
        }

    def get_descriptors(self) -> Sequence[RouteDescriptor]:
        """Return one descriptor per APIRoute."""
        descriptors: list[RouteDescriptor] = []
        for route in _api_routes(self._app.routes):
            group_name = self.group_name_for(route)
            descriptors.append(
                RouteDescriptor(
                    group_name=group_name,
                    action_name=route.name,
                    group=MemberMetadata(
                        name=group_name,
                        annotations=self._group_annotations.get(group_name, ()),
                    ),
                    action=member_metadata_for(route.endpoint, name=route.name),
                )
            )
        return descriptors

    @staticmethod
    def group_name_for(route: APIRoute) -> str:
        """First tag of the route, else the endpoint module's last segment."""
        if route.tags:
            tag = route.tags[0]
            return str(tag.value) if isinstance(tag, Enum) else str(tag)
        return route.endpoint.__module__.rsplit(".", 1)[-1]


def _api_routes(routes: Iterable[object]) -> Iterator[APIRoute]:
    """APIRoute entries in registration order, descending into included routers."""
    for route in routes:
        if isinstance(route, APIRoute):
            yield route
            continue
        included = getattr(route, "original_router", None)
        if included is not None:
            yield from _api_routes(included.routes)
