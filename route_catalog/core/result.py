"""Success/Failure values for outcomes that are not programming errors.

A missing handler group or a session value of the wrong shape is an
expected outcome, so those operations return a Result and callers match
on it. Bad arguments still raise InvalidArgumentError.

Usage:
    match find_group(discovery, "orders"):
        case Success(value=group):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Outcome carrying a value (which may itself be None)."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Outcome carrying a DomainError."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
