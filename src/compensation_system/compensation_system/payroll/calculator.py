from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..common.money import to_money
from ..common.validators import require_non_negative
from ..compensation.strategies.base import CompensationStrategy
from ..core.constants import BASE_PAY
from ..employees.model import EmployeeRecord
from ..hours.policy import RegularHoursCalculator, RegularHoursPolicy
from .model import PayResult


class PayCalculator:
    """Payroll use case: total pay for one employee.

    total = strategy.compute_salary(base, regular_hours) + allowance

    Works against the CompensationStrategy capability only, so new roles need
    no change here. No side effects.
    """

    def __init__(
        self,
        hours_policy: Optional[RegularHoursPolicy] = None,
        *,
        base: Decimal = BASE_PAY,
    ):
        self._hours = hours_policy or RegularHoursCalculator()
        self._base = require_non_negative(base, "base")

    @property
    def base(self) -> Decimal:
        return self._base

    def compute(
        self,
        employee: EmployeeRecord,
        strategy: CompensationStrategy,
        allowance: Decimal = Decimal("0"),
    ) -> PayResult:
        allowance = require_non_negative(allowance, "allowance")
        regular_hours = self._hours(employee)
        salary = strategy.compute_salary(self._base, regular_hours)
        return PayResult(
            employee_id=employee.employee_id,
            amount=to_money(salary + allowance),
            regular_hours=regular_hours,
            role=employee.role,
        )
