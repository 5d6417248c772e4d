from decimal import Decimal

import pytest

from src.compensation_system.compensation_system.compensation.strategies.base import CompensationStrategy
from src.compensation_system.compensation_system.compensation.strategies.intern_strategy import InternStrategy
from src.compensation_system.compensation_system.compensation.strategies.manager_strategy import ManagerStrategy
from src.compensation_system.compensation_system.compensation.strategies.staff_strategy import StaffStrategy
from src.compensation_system.compensation_system.core.exceptions import ValidationError
from src.compensation_system.compensation_system.employees.model import EmployeeRecord
from src.compensation_system.compensation_system.hours.policy import RegularHoursCalculator
from src.compensation_system.compensation_system.payroll.calculator import PayCalculator


def _employee(hours=40, role="staff"):
    return EmployeeRecord(employee_id=1, name="A", department="Accounting", role=role, hours_worked=hours)


class RecordingHoursPolicy:
    def __init__(self):
        self.seen = []

    def __call__(self, employee):
        self.seen.append(employee.employee_id)
        return min(employee.hours_worked, Decimal("40"))


def test_staff_with_allowance():
    result = PayCalculator().compute(_employee(40), StaffStrategy(), allowance=10)

    assert result.amount == 110
    assert result.employee_id == 1
    assert result.regular_hours == Decimal("40")


def test_allowance_defaults_to_zero():
    assert PayCalculator().compute(_employee(), ManagerStrategy()).amount == Decimal("200.00")


def test_intern_half_base():
    assert PayCalculator().compute(_employee(role="intern"), InternStrategy()).amount == Decimal("50.00")


def test_negative_allowance_rejected():
    with pytest.raises(ValidationError):
        PayCalculator().compute(_employee(), StaffStrategy(), allowance=-1)


def test_regular_hours_come_from_injected_policy():
    policy = RecordingHoursPolicy()
    result = PayCalculator(policy).compute(_employee(45), StaffStrategy())

    assert policy.seen == [1]
    assert result.regular_hours == Decimal("40")


def test_custom_base():
    calc = PayCalculator(RegularHoursCalculator(), base=Decimal("250"))

    assert calc.compute(_employee(), ManagerStrategy()).amount == Decimal("500.00")


def test_new_role_needs_only_a_new_strategy():
    # PayCalculator sees only the CompensationStrategy capability.
    class LeaderLikeStrategy(CompensationStrategy):
        role = "principal"
        base_multiplier = Decimal("1.5")

        def compute_salary(self, base, hours):
            return base * self.base_multiplier

    strategy = LeaderLikeStrategy()
    e = EmployeeRecord(
        employee_id=9,
        name="P",
        department="R&D",
        role="principal",
        hours_worked=40,
        strategy=strategy,
    )

    assert PayCalculator().compute(e, strategy).amount == Decimal("150.00")
