"""Stateless helpers for enums, sessions, and requests."""

from route_catalog.presentation.helpers.enum_parser import (
    SelectItem,
    member_display_name,
    to_dict,
    to_select_list,
)
from route_catalog.presentation.helpers.http_request import get_base_url, is_ajax_request
from route_catalog.presentation.helpers.session import get_object, set_object

__all__ = [
    "SelectItem",
    "get_base_url",
    "get_object",
    "is_ajax_request",
    "member_display_name",
    "set_object",
    "to_dict",
    "to_select_list",
]
