"""Small helpers over Starlette requests."""

from starlette.requests import Request

from route_catalog.core.errors import InvalidArgumentError


def is_ajax_request(request: Request) -> bool:
    """Whether the request was sent by XMLHttpRequest.

    Raises:
        InvalidArgumentError: If request is None.
    """
    if request is None:
        raise InvalidArgumentError("request")
    return request.headers.get("x-requested-with") == "XMLHttpRequest"


def get_base_url(request: Request) -> str:
    """Scheme and host of the request, e.g. ``https://example.com``.

    Raises:
        InvalidArgumentError: If request is None.
    """
    if request is None:
        raise InvalidArgumentError("request")
    return f"{request.url.scheme}://{request.url.netloc}"
