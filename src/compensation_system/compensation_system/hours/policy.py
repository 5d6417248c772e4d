from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from ..common.validators import require_non_negative
from ..core.constants import REGULAR_HOURS_CAP
from ..employees.model import EmployeeRecord


def overtime_hours(employee: EmployeeRecord, regular_hours: Decimal) -> Decimal:
    """Hours worked beyond whatever a policy counted as regular."""
    return max(employee.hours_worked - regular_hours, Decimal("0"))


class RegularHoursPolicy(Protocol):
    """Anything mapping an employee to regular (non-overtime) hours."""

    def __call__(self, employee: EmployeeRecord) -> Decimal:
        raise NotImplementedError


class RegularHoursCalculator:
    """Regular hours = min(hours_worked, cap).

    The single place the regular-hours rule lives. Payroll and HR reporting
    both receive an instance; neither keeps a copy of the rule.
    """

    def __init__(self, cap: Decimal = REGULAR_HOURS_CAP):
        self._cap = require_non_negative(cap, "cap")

    @property
    def cap(self) -> Decimal:
        return self._cap

    def regular_hours(self, employee: EmployeeRecord) -> Decimal:
        return min(employee.hours_worked, self._cap)

    def overtime_hours(self, employee: EmployeeRecord) -> Decimal:
        return overtime_hours(employee, self.regular_hours(employee))

    __call__ = regular_hours
