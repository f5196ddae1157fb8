"""Machine-readable codes carried by DomainError.

The value doubles as the problem type suffix in HTTP error bodies
(``/errors/handler_group_not_found``).
"""

from enum import Enum


class ErrorCode(Enum):
    """Codes for errors returned as data."""

    # Lookups
    HANDLER_GROUP_NOT_FOUND = "handler_group_not_found"

    # Session values
    VALUE_CONVERSION_FAILED = "value_conversion_failed"
