"""Descriptor source over a fixed descriptor list.

Useful when descriptors come from a registry or another process.
"""

from collections.abc import Iterable, Sequence

from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.errors import CatalogError
from route_catalog.domain.value_objects import RouteDescriptor


class StaticDescriptorSource:
    """DescriptorSource returning a snapshot taken at construction."""

    def __init__(self, descriptors: Iterable[RouteDescriptor]) -> None:
        if descriptors is None:
            raise InvalidArgumentError("descriptors", CatalogError.DESCRIPTORS_REQUIRED)
        self._descriptors = tuple(descriptors)

    def get_descriptors(self) -> Sequence[RouteDescriptor]:
        return self._descriptors
