from decimal import Decimal

from src.compensation_system.compensation_system.compensation.strategies.staff_strategy import StaffStrategy
from src.compensation_system.compensation_system.employees.model import EmployeeRecord
from src.compensation_system.compensation_system.hours.policy import RegularHoursCalculator
from src.compensation_system.compensation_system.payroll.calculator import PayCalculator
from src.compensation_system.compensation_system.reporting.hour_reporter import HourReporter


def _employee(hours):
    return EmployeeRecord(employee_id=4, name="Mai", department="HR", role="staff", hours_worked=hours)


def test_report_formats_regular_and_overtime():
    report = HourReporter().report(_employee(42.5))

    assert report.employee_id == 4
    assert report.regular_hours == Decimal("40")
    assert report.overtime_hours == Decimal("2.5")
    assert report.formatted_summary == "Mai (HR): regular 40:00, overtime 02:30"


def test_report_and_pay_agree_on_regular_hours():
    hours = RegularHoursCalculator()
    e = _employee(44)

    report = HourReporter(hours).report(e)
    pay = PayCalculator(hours).compute(e, StaffStrategy(), 0)

    assert report.regular_hours == pay.regular_hours == Decimal("40")


def test_changing_policy_once_changes_both_consumers():
    hours = RegularHoursCalculator(Decimal("35"))
    e = _employee(40)

    report = HourReporter(hours).report(e)
    pay = PayCalculator(hours).compute(e, StaffStrategy(), 0)

    assert report.regular_hours == pay.regular_hours == Decimal("35")
    assert report.overtime_hours == Decimal("5")


class FlatPolicy:
    """Counts at most 30 hours as regular."""

    def __call__(self, employee):
        return min(employee.hours_worked, Decimal("30"))


def test_reporter_overtime_matches_calculator_overtime():
    hours = RegularHoursCalculator(Decimal("38"))
    e = _employee(41)

    assert HourReporter(hours).report(e).overtime_hours == hours.overtime_hours(e) == Decimal("3")


def test_reporter_overtime_follows_any_injected_policy():
    report = HourReporter(FlatPolicy()).report(_employee(36))

    assert report.regular_hours == Decimal("30")
    assert report.overtime_hours == Decimal("6")
