from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from ..core.enums import role_tag
from ..core.exceptions import UnknownRoleError, ValidationError
from ..employees.model import EmployeeRecord
from .strategies.base import CompensationStrategy
from .strategies.intern_strategy import InternStrategy
from .strategies.leader_strategy import LeaderStrategy
from .strategies.manager_strategy import ManagerStrategy
from .strategies.staff_strategy import StaffStrategy


@dataclass(frozen=True)
class StrategyRegistry:
    """Role tag -> CompensationStrategy lookup (configuration, not logic).

    Registries are values: ``register`` returns a new registry and leaves this
    one untouched, so callers holding a registry never see it change.
    """

    strategies: Mapping[str, CompensationStrategy] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {}
        for role, strategy in dict(self.strategies).items():
            if not isinstance(strategy, CompensationStrategy):
                raise ValidationError(f"Strategy for {role!r} must be a CompensationStrategy")
            normalized[role_tag(role)] = strategy
        object.__setattr__(self, "strategies", MappingProxyType(normalized))

    def register(self, role, strategy: CompensationStrategy) -> "StrategyRegistry":
        return StrategyRegistry({**self.strategies, role_tag(role): strategy})

    def get(self, role) -> Optional[CompensationStrategy]:
        return self.strategies.get(role_tag(role))

    def roles(self) -> list[str]:
        return sorted(self.strategies)

    def __contains__(self, role) -> bool:
        return role_tag(role) in self.strategies

    def resolve(self, employee: EmployeeRecord) -> CompensationStrategy:
        """Strategy attached to the record wins; otherwise look up by role."""
        if employee.strategy is not None:
            return employee.strategy
        strategy = self.get(employee.role)
        if strategy is None:
            raise UnknownRoleError(employee.role)
        return strategy

    def build_record(self, **fields: Any) -> EmployeeRecord:
        """Build a record for any registered role, attaching its strategy.

        Roles outside the built-in ``Role`` tags are recognized as long as this
        registry knows them. An explicit ``strategy`` in ``fields`` wins.
        """
        if fields.get("strategy") is None:
            fields["strategy"] = self.get(fields.get("role"))
        return EmployeeRecord(**fields)


def registry_from(strategies: Iterable[CompensationStrategy]) -> StrategyRegistry:
    return StrategyRegistry({s.role: s for s in strategies})


def default_registry() -> StrategyRegistry:
    return registry_from([InternStrategy(), StaffStrategy(), ManagerStrategy(), LeaderStrategy()])
