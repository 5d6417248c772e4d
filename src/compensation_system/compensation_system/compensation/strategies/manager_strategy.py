from __future__ import annotations

from decimal import Decimal

from ...core.enums import Role
from .base import CompensationStrategy


class ManagerStrategy(CompensationStrategy):
    """Manager rule: double base."""

    role = Role.MANAGER.value
    base_multiplier = Decimal("2.0")

    def compute_salary(self, base: Decimal, hours: Decimal) -> Decimal:
        return Decimal(base) * self.base_multiplier
