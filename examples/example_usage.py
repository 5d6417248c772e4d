"""Example: use the service layer directly (no Flask).

Goal: show SOLID/OOP in action - the controller is a thin layer, the rules live
in calculators and services.
"""

import importlib
from decimal import Decimal

from config import get_settings_module

from src.compensation_system.compensation_system.container import build_container
from src.compensation_system.compensation_system.core.enums import Role
from src.compensation_system.compensation_system.employees.model import EmployeeRecord


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(compensation=settings.COMPENSATION)

    staff = [
        EmployeeRecord(employee_id=1, name="Aiko", department="Accounting", role=Role.STAFF, hours_worked=40),
        EmployeeRecord(employee_id=2, name="Ben", department="Accounting", role=Role.MANAGER, hours_worked=45),
        EmployeeRecord(employee_id=3, name="Chi", department="HR", role=Role.INTERN, hours_worked=20),
    ]

    for e in staff:
        pay = container.pay_calculator.compute(e, container.registry.resolve(e), Decimal("10"))
        print(pay.employee_id, pay.amount, container.currency)
        print(container.hour_reporter.report(e).formatted_summary)

    report = container.report_service.build_report(staff)
    print(container.report_service.to_dataframe(report))


if __name__ == "__main__":
    main()
