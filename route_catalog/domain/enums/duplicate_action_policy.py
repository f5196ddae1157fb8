"""Duplicate action policy enum.

Controls what the catalog builder does when a descriptor maps to an action
id that already exists in its group.
"""

from enum import Enum


class DuplicateActionPolicy(str, Enum):
    """How the catalog builder treats duplicate actions.

    Attributes:
        IGNORE: Keep the first occurrence, skip later ones.
        REJECT: Abort catalog construction with InvalidArgumentError.
    """

    IGNORE = "ignore"
    REJECT = "reject"
