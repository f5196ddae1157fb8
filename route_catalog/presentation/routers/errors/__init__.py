"""RFC 7807 error responses."""

from route_catalog.presentation.routers.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from route_catalog.presentation.routers.errors.problem_details import ProblemDetails

__all__ = ["ErrorResponseBuilder", "ProblemDetails"]
