from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..employees.model import EmployeeId


@dataclass(frozen=True)
class HourReport:
    employee_id: EmployeeId
    regular_hours: Decimal
    overtime_hours: Decimal
    formatted_summary: str


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]
