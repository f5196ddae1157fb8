"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement them without inheritance.

Usage:
    from route_catalog.domain.protocols import DescriptorSource, LoggerProtocol
"""

from route_catalog.domain.protocols.descriptor_source_protocol import DescriptorSource
from route_catalog.domain.protocols.handler_discovery_protocol import (
    HandlerDiscoveryProtocol,
)
from route_catalog.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "DescriptorSource",
    "HandlerDiscoveryProtocol",
    "LoggerProtocol",
]
