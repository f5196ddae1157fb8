"""Problem details body (RFC 7807) for catalog error responses."""

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """Error body returned by the catalog router.

    ``type`` is a relative URI built from the ErrorCode value, ``instance``
    is the request path that failed.

    Example:
        {
            "type": "/errors/handler_group_not_found",
            "title": "Resource Not Found",
            "status": 404,
            "detail": "Handler group not found: reports",
            "instance": "/catalog/handlers/reports"
        }
    """

    type: str = Field(
        ...,
        description="Problem type URI (/errors/<error code>)",
        examples=["/errors/handler_group_not_found"],
    )
    title: str = Field(..., description="Summary of the problem type")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(..., description="What went wrong for this request")
    instance: str = Field(
        ...,
        description="Path of the failing request",
        examples=["/catalog/handlers/reports"],
    )
