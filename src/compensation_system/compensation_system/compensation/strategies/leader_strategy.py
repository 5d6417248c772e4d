from __future__ import annotations

from decimal import Decimal

from ...core.enums import Role
from .base import CompensationStrategy


class LeaderStrategy(CompensationStrategy):
    """Team leader rule: base * 1.5."""

    role = Role.LEADER.value
    base_multiplier = Decimal("1.5")

    def compute_salary(self, base: Decimal, hours: Decimal) -> Decimal:
        return Decimal(base) * self.base_multiplier
