from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Built-in default role tags.

    Not the full set of roles: a StrategyRegistry can register more without
    touching this enum.
    """

    INTERN = "intern"
    STAFF = "staff"
    MANAGER = "manager"
    LEADER = "leader"

    @classmethod
    def is_recognized(cls, tag: str) -> bool:
        return any(tag == r.value for r in cls)


def role_tag(role) -> str:
    """Normalize a Role member or free-form tag to its lower-case string."""
    if isinstance(role, Role):
        return role.value
    return str(role or "").strip().lower()
