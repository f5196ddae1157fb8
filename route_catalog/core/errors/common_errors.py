"""Common error classes used across the catalog and its helpers.

Two families live here:

Data errors (DomainError subclasses, returned in Result):
- NotFoundError: A named resource (handler group) does not exist
- ConversionError: A stored value could not be adapted to the requested shape

Exceptions (raised synchronously for programming errors):
- InvalidArgumentError: A required argument is missing or malformed
- CatalogConsistencyError: An internal catalog invariant was violated

Usage:
    from route_catalog.core.errors import InvalidArgumentError, NotFoundError
    from route_catalog.core.enums import ErrorCode
    from route_catalog.core.result import Failure

    return Failure(NotFoundError(
        code=ErrorCode.HANDLER_GROUP_NOT_FOUND,
        message="Handler group 'orders' not found",
        resource_type="HandlerGroup",
        resource_id="orders",
    ))
"""

from dataclasses import dataclass

from route_catalog.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (HandlerGroup, etc.).
        resource_id: Identifier of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConversionError(DomainError):
    """Stored value could not be adapted to the requested type.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        target_type: Name of the type the caller asked for.
        details: Additional context.
    """

    target_type: str


class InvalidArgumentError(ValueError):
    """Raised when a required argument is None or malformed."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument.
            message: Optional explanation. Defaults to "<argument> is required".
        """
        super().__init__(message or f"{argument} is required")
        self.argument = argument


class CatalogConsistencyError(RuntimeError):
    """Raised when catalog construction detects a broken invariant."""

    pass
