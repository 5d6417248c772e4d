from __future__ import annotations

from decimal import Decimal

from ...core.enums import Role
from .base import CompensationStrategy


class StaffStrategy(CompensationStrategy):
    """Staff rule: base as is."""

    role = Role.STAFF.value
    base_multiplier = Decimal("1.0")

    def compute_salary(self, base: Decimal, hours: Decimal) -> Decimal:
        return Decimal(base) * self.base_multiplier
