from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..employees.model import EmployeeId


@dataclass(frozen=True)
class PayResult:
    employee_id: EmployeeId
    amount: Decimal
    regular_hours: Decimal
    role: str
