"""DescriptorSource protocol.

Port through which the catalog receives discovered route handlers. Discovery
itself (walking classes, reading a FastAPI route table, reading a registry)
belongs to infrastructure adapters.

Usage:
    from route_catalog.domain.protocols import DescriptorSource

    def build(source: DescriptorSource) -> None:
        for descriptor in source.get_descriptors():
            ...
"""

from collections.abc import Sequence
from typing import Protocol

from route_catalog.domain.value_objects import RouteDescriptor


class DescriptorSource(Protocol):
    """Supplies an ordered snapshot of route descriptors."""

    def get_descriptors(self) -> Sequence[RouteDescriptor]:
        """Return every discovered route descriptor.

        Returns:
            Descriptors in discovery order. Order determines group order and
            action order in the catalog.
        """
        ...
