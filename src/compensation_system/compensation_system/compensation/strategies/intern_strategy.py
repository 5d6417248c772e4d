from __future__ import annotations

from decimal import Decimal

from ...core.enums import Role
from .base import CompensationStrategy


class InternStrategy(CompensationStrategy):
    """Intern rule: half of base."""

    role = Role.INTERN.value
    base_multiplier = Decimal("0.5")

    def compute_salary(self, base: Decimal, hours: Decimal) -> Decimal:
        return Decimal(base) * self.base_multiplier
