from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...core.exceptions import ValidationError


class CompensationStrategy(ABC):
    """Strategy Pattern: encapsulate how a role turns base pay into salary.

    Variants are stateless and reusable across employees. Each one declares
    its own ``role`` tag and ``base_multiplier``; adding a role means adding a
    subclass, nothing else changes.
    """

    role: str
    base_multiplier: Decimal

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        multiplier = cls.__dict__.get("base_multiplier")
        if multiplier is not None and not Decimal(multiplier) > 0:
            raise ValidationError(f"{cls.__name__}.base_multiplier must be > 0 (got {multiplier})")

        compute = cls.__dict__.get("compute_salary")
        if compute is not None and not getattr(compute, "__isabstractmethod__", False):
            role = getattr(cls, "role", None)
            if not isinstance(role, str) or not role.strip():
                raise ValidationError(f"{cls.__name__}.role must be a non-empty role tag")

    @abstractmethod
    def compute_salary(self, base: Decimal, hours: Decimal) -> Decimal:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(role={self.role!r}, base_multiplier={self.base_multiplier})"
