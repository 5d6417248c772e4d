from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import Role, role_tag
from ..core.exceptions import UnknownRoleError, ValidationError

if TYPE_CHECKING:
    from ..compensation.strategies.base import CompensationStrategy

EmployeeId = Union[int, str]

PERSISTED_FIELDS = ("employee_id", "name", "department", "role", "hours_worked", "title")


def require_employee_id(value: Any) -> EmployeeId:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError(f"employee_id must be an int or a string (got {type(value).__name__})")
    if isinstance(value, str):
        return require_non_empty(value, "employee_id")
    return value


def _optional_title(value: Any) -> Optional[str]:
    if value is None:
        return None
    return require_non_empty(value, "title")


FIELD_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "name": lambda v: require_non_empty(v, "name"),
    "department": lambda v: require_non_empty(v, "department"),
    "role": lambda v: require_non_empty(role_tag(v), "role"),
    "hours_worked": lambda v: require_non_negative(v, "hours_worked"),
    "title": _optional_title,
}


def clean_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a subset of employee fields with the same rules as EmployeeRecord."""
    unknown = set(fields) - set(FIELD_VALIDATORS)
    if unknown:
        raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")
    return {name: FIELD_VALIDATORS[name](value) for name, value in fields.items()}


@dataclass(frozen=True)
class EmployeeRecord:
    """Domain entity: one employee's compensation inputs.

    Pure data, no behaviour. Validated on construction; an "update" is a new
    record built with ``with_changes``. ``Role`` holds the built-in default
    tags; any other role must bring its own ``strategy`` (see
    ``StrategyRegistry.build_record`` for roles registered in configuration).
    """

    employee_id: EmployeeId
    name: str
    department: str
    role: str
    hours_worked: Decimal = Decimal("0")
    title: Optional[str] = None
    strategy: Optional["CompensationStrategy"] = dataclasses.field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "employee_id", require_employee_id(self.employee_id))
        cleaned = clean_fields({name: getattr(self, name) for name in FIELD_VALIDATORS})
        for name, value in cleaned.items():
            object.__setattr__(self, name, value)

        if self.strategy is None and not Role.is_recognized(self.role):
            raise UnknownRoleError(self.role)

    def with_changes(self, **changes: Any) -> "EmployeeRecord":
        return dataclasses.replace(self, **changes)

    def persistable_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in PERSISTED_FIELDS if name != "employee_id"}
