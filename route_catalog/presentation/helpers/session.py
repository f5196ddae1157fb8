"""Store and read structured values in a session mapping.

Works with any mutable string mapping, e.g. Starlette's ``request.session``
(SessionMiddleware). Values are serialized to JSON with pydantic.

Usage:
    set_object(request.session, "cart", cart)
    match get_object(request.session, "cart", Cart):
        case Success(value=None):
            ...  # nothing stored
        case Success(value=cart):
            ...
        case Failure(error=error):
            ...  # stored value does not fit Cart
"""

from collections.abc import MutableMapping
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from route_catalog.core.enums import ErrorCode
from route_catalog.core.errors import ConversionError, InvalidArgumentError
from route_catalog.core.result import Failure, Result, Success

T = TypeVar("T")


def set_object(session: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Serialize value to JSON and store it under key.

    Raises:
        InvalidArgumentError: If session or value is None, or key is blank.
    """
    _require_session(session, key)
    if value is None:
        raise InvalidArgumentError("value")
    session[key] = TypeAdapter(type(value)).dump_json(value).decode()


def get_object(
    session: MutableMapping[str, Any], key: str, target_type: type[T]
) -> Result[T | None, ConversionError]:
    """Read the value stored under key as target_type.

    Returns:
        Success(None) when nothing is stored, Success(value) when the stored
        JSON validates as target_type, Failure(ConversionError) otherwise.

    Raises:
        InvalidArgumentError: If session is None or key is blank.
    """
    _require_session(session, key)
    raw = session.get(key)
    if raw is None:
        return Success(value=None)
    try:
        return Success(value=TypeAdapter(target_type).validate_json(raw))
    except PydanticValidationError as e:
        return Failure(
            error=ConversionError(
                code=ErrorCode.VALUE_CONVERSION_FAILED,
                message=f"The value could not be converted to {_type_name(target_type)}",
                target_type=_type_name(target_type),
                details={"key": key, "errors": str(e.error_count())},
            )
        )


def _require_session(session: Any, key: str) -> None:
    if session is None:
        raise InvalidArgumentError("session")
    if not isinstance(key, str) or not key.strip():
        raise InvalidArgumentError("key", "key is null or empty or white space")


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", repr(target_type))
