"""Base class for errors returned as data.

Subclasses describe expected failures (NotFoundError, ConversionError) and
travel inside ``Failure``. They are never raised; the router turns them into
problem details through ErrorResponseBuilder, keyed by ``code``.
"""

from dataclasses import dataclass

from route_catalog.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value with a machine-readable code.

    Attributes:
        code: ErrorCode, also used as the problem type URI suffix.
        message: Text shown as the problem ``detail``.
        details: Extra string fields for logs and debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
