"""Descriptor source for class-based handler groups.

Each handler class is a group ("controller"); each public method defined on
the class or inherited from a base class is an action.

Naming:
    The group name is the class name without a conventional suffix:
    ``OrdersController`` -> ``Orders``, ``UserHandlers`` -> ``User``.

Usage:
    source = ClassHandlerSource(OrdersController, UsersController)
    discovery = HandlerDiscoveryService(source, logger=logger)
"""

import inspect
from collections.abc import Iterable, Sequence
from typing import Any

from route_catalog.core.errors import InvalidArgumentError
from route_catalog.domain.value_objects import RouteDescriptor
from route_catalog.infrastructure.discovery.introspection import member_metadata_for

DEFAULT_SUFFIXES: tuple[str, ...] = ("Controller", "Handlers", "Handler")


class ClassHandlerSource:
    """Reads route descriptors from handler classes.

    Implements DescriptorSource. Descriptors are produced class by class, so
    actions of one group are always contiguous.
    """

    def __init__(
        self, *handler_types: type, suffixes: Iterable[str] = DEFAULT_SUFFIXES
    ) -> None:
        """Initialize source.

        Args:
            *handler_types: Handler classes, in the order groups should appear.
            suffixes: Class-name suffixes stripped to form group names.

        Raises:
            InvalidArgumentError: If an entry is not a class.
        """
        for handler_type in handler_types:
            if not isinstance(handler_type, type):
                raise InvalidArgumentError(
                    "handler_types", f"Handler type must be a class: {handler_type!r}"
                )
        self._handler_types = handler_types
        self._suffixes = tuple(suffixes)

    def get_descriptors(self) -> Sequence[RouteDescriptor]:
        """Return one descriptor per public method of every handler class."""
        descriptors: list[RouteDescriptor] = []
        for handler_type in self._handler_types:
            group_name = self.group_name_for(handler_type)
            group = member_metadata_for(handler_type)
            for action_name, function in _public_functions(handler_type):
                descriptors.append(
                    RouteDescriptor(
                        group_name=group_name,
                        action_name=action_name,
                        group=group,
                        action=member_metadata_for(function, name=action_name),
                    )
                )
        return descriptors

    def group_name_for(self, handler_type: type) -> str:
        """Class name with the first matching suffix removed."""
        name = handler_type.__name__
        for suffix in self._suffixes:
            if name.endswith(suffix) and len(name) > len(suffix):
                return name[: -len(suffix)]
        return name


def _public_functions(cls: type) -> list[tuple[str, Any]]:
    """Public plain functions of cls: own methods first, then inherited ones."""
    found: dict[str, Any] = {}
    for klass in inspect.getmro(cls):
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_") or name in found:
                continue
            if inspect.isfunction(member):
                found[name] = member
    return list(found.items())
