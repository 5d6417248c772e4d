from __future__ import annotations

from typing import Optional

from ..common.money import format_hours
from ..employees.model import EmployeeRecord
from ..hours.policy import RegularHoursCalculator, RegularHoursPolicy, overtime_hours
from .model import HourReport


class HourReporter:
    """HR use case: labor-hours report for one employee.

    Knows nothing about strategies or allowances.
    """

    def __init__(self, hours_policy: Optional[RegularHoursPolicy] = None):
        self._hours = hours_policy or RegularHoursCalculator()

    def report(self, employee: EmployeeRecord) -> HourReport:
        regular = self._hours(employee)
        overtime = overtime_hours(employee, regular)
        summary = (
            f"{employee.name} ({employee.department}): "
            f"regular {format_hours(regular)}, overtime {format_hours(overtime)}"
        )
        return HourReport(
            employee_id=employee.employee_id,
            regular_hours=regular,
            overtime_hours=overtime,
            formatted_summary=summary,
        )
