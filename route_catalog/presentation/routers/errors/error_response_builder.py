"""Error response builder for RFC 7807 Problem Details.

Builds JSON error responses from domain errors returned by the catalog.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from route_catalog.core.enums import ErrorCode
from route_catalog.core.errors import DomainError
from route_catalog.presentation.routers.errors.problem_details import ProblemDetails


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = NotFoundError(
        ...     code=ErrorCode.HANDLER_GROUP_NOT_FOUND,
        ...     message="Handler group not found: reports",
        ...     resource_type="HandlerGroup",
        ...     resource_id="reports",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error, request)
    """

    _STATUS = {
        ErrorCode.HANDLER_GROUP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    }

    _TITLES = {
        ErrorCode.HANDLER_GROUP_NOT_FOUND: "Resource Not Found",
    }

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error to convert.
            request: Request being answered (for the instance URI).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder._STATUS.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        problem = ProblemDetails(
            type=f"/errors/{error.code.value}",
            title=ErrorResponseBuilder._TITLES.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=status_code, content=problem.model_dump())
