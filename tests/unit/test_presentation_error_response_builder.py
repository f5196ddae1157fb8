"""Unit tests for ErrorResponseBuilder."""

import json

import pytest
from starlette.requests import Request

from route_catalog.core.enums import ErrorCode
from route_catalog.core.errors import ConversionError, NotFoundError
from route_catalog.presentation.routers.errors import ErrorResponseBuilder


def _request(path: str) -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "headers": []})


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Tests for domain error to problem details conversion."""

    def test_group_not_found(self):
        error = NotFoundError(
            code=ErrorCode.HANDLER_GROUP_NOT_FOUND,
            message="Handler group not found: reports",
            resource_type="HandlerGroup",
            resource_id="reports",
        )

        response = ErrorResponseBuilder.from_domain_error(
            error, _request("/catalog/handlers/reports")
        )

        assert response.status_code == 404
        assert json.loads(response.body) == {
            "type": "/errors/handler_group_not_found",
            "title": "Resource Not Found",
            "status": 404,
            "detail": "Handler group not found: reports",
            "instance": "/catalog/handlers/reports",
        }

    def test_unmapped_code_is_server_error(self):
        """Codes no catalog route returns fall back to 500."""
        error = ConversionError(
            code=ErrorCode.VALUE_CONVERSION_FAILED,
            message="The value could not be converted to Cart",
            target_type="Cart",
        )

        response = ErrorResponseBuilder.from_domain_error(error, _request("/cart"))

        body = json.loads(response.body)
        assert response.status_code == 500
        assert body["title"] == "Internal Server Error"
        assert body["type"] == "/errors/value_conversion_failed"
