"""Convert enums to selectable option lists.

Display text for a member is, in order of preference: its ``display_name``
attribute, its ``description`` attribute, or its name.

Usage:
    class OrderStatus(Enum):
        PENDING = 1
        SHIPPED = 2

        @property
        def display_name(self) -> str:
            return self.name.title()

    to_select_list(OrderStatus, selected=OrderStatus.SHIPPED)
    [SelectItem(value=1, text='Pending', selected=False),
     SelectItem(value=2, text='Shipped', selected=True)]
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from route_catalog.core.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True, kw_only=True)
class SelectItem:
    """One option of a select list.

    Attributes:
        value: Enum member value.
        text: Display text.
        selected: Whether this option is pre-selected.
    """

    value: Any
    text: str
    selected: bool = False


def to_select_list(enum_type: type[Enum], selected: Any = None) -> list[SelectItem]:
    """Build select options from an enum, in definition order.

    Args:
        enum_type: Enum class.
        selected: Member or member value to mark as selected.

    Returns:
        One SelectItem per member.

    Raises:
        InvalidArgumentError: If enum_type is not an Enum subclass.
    """
    _require_enum(enum_type)
    selected_value = selected.value if isinstance(selected, Enum) else selected
    return [
        SelectItem(
            value=member.value,
            text=member_display_name(member),
            selected=selected is not None and member.value == selected_value,
        )
        for member in enum_type
    ]


def to_dict(enum_type: type[Enum]) -> dict[Any, str]:
    """Map every member value of an enum to its display text.

    Raises:
        InvalidArgumentError: If enum_type is not an Enum subclass.
    """
    _require_enum(enum_type)
    return {member.value: member_display_name(member) for member in enum_type}


def member_display_name(member: Enum) -> str:
    """Display text for one enum member."""
    for attribute in ("display_name", "description"):
        text = getattr(member, attribute, None)
        if isinstance(text, str) and text:
            return text
    return member.name


def _require_enum(enum_type: Any) -> None:
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise InvalidArgumentError("enum_type", f"{enum_type!r} is not an enum")
