from decimal import Decimal

import pytest

from src.compensation_system.compensation_system.compensation.strategies.base import CompensationStrategy
from src.compensation_system.compensation_system.core.enums import Role
from src.compensation_system.compensation_system.core.exceptions import UnknownRoleError, ValidationError
from src.compensation_system.compensation_system.employees.model import EmployeeRecord


class ContractorStrategy(CompensationStrategy):
    role = "contractor"
    base_multiplier = Decimal("1.25")

    def compute_salary(self, base, hours):
        return base * self.base_multiplier


def test_record_normalizes_role_and_hours():
    e = EmployeeRecord(employee_id=1, name=" A ", department="IT", role=Role.STAFF, hours_worked=37.5)

    assert e.role == "staff"
    assert e.name == "A"
    assert e.hours_worked == Decimal("37.5")


def test_negative_hours_rejected():
    with pytest.raises(ValidationError):
        EmployeeRecord(employee_id=1, name="A", department="IT", role="staff", hours_worked=-5)


def test_non_numeric_hours_rejected():
    with pytest.raises(ValidationError):
        EmployeeRecord(employee_id=1, name="A", department="IT", role="staff", hours_worked="lots")


def test_empty_name_rejected():
    with pytest.raises(ValidationError):
        EmployeeRecord(employee_id=1, name="  ", department="IT", role="staff", hours_worked=8)


def test_unknown_role_without_strategy_rejected():
    with pytest.raises(UnknownRoleError) as exc:
        EmployeeRecord(employee_id=1, name="A", department="IT", role="contractor", hours_worked=8)

    assert exc.value.role == "contractor"


def test_unknown_role_with_attached_strategy_accepted():
    e = EmployeeRecord(
        employee_id=1,
        name="A",
        department="IT",
        role="contractor",
        hours_worked=8,
        strategy=ContractorStrategy(),
    )

    assert isinstance(e.strategy, ContractorStrategy)


def test_record_is_immutable_and_updates_make_new_records():
    e = EmployeeRecord(employee_id=1, name="A", department="IT", role="staff", hours_worked=8)

    with pytest.raises(AttributeError):
        e.hours_worked = Decimal("10")

    updated = e.with_changes(hours_worked=10)
    assert updated.hours_worked == Decimal("10")
    assert e.hours_worked == Decimal("8")


def test_update_is_validated_too():
    e = EmployeeRecord(employee_id=1, name="A", department="IT", role="staff", hours_worked=8)

    with pytest.raises(ValidationError):
        e.with_changes(hours_worked=-1)


def test_persistable_fields_exclude_strategy_and_id():
    e = EmployeeRecord(employee_id=1, name="A", department="IT", role="staff", hours_worked=8, title="Clerk")

    assert e.persistable_fields() == {
        "name": "A",
        "department": "IT",
        "role": "staff",
        "hours_worked": Decimal("8"),
        "title": "Clerk",
    }


@pytest.mark.parametrize("bad_id", [[1], {"id": 1}, True, None, "  "])
def test_employee_id_must_be_int_or_string(bad_id):
    with pytest.raises(ValidationError):
        EmployeeRecord(employee_id=bad_id, name="A", department="IT", role="staff", hours_worked=8)
