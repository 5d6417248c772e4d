from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.validators import require_non_negative
from .compensation.registry import StrategyRegistry, default_registry
from .core.constants import BASE_PAY, DEFAULT_CURRENCY, REGULAR_HOURS_CAP
from .employees.memory_gateway import InMemoryEmployeeStore
from .employees.service import EmployeeService
from .hours.policy import RegularHoursCalculator
from .payroll.calculator import PayCalculator
from .reporting.hour_reporter import HourReporter
from .reporting.service import CompensationReportService


@dataclass(frozen=True)
class Container:
    currency: str

    registry: StrategyRegistry
    hours_calculator: RegularHoursCalculator
    employee_store: InMemoryEmployeeStore

    pay_calculator: PayCalculator
    hour_reporter: HourReporter
    employee_service: EmployeeService
    report_service: CompensationReportService


def build_container(
    *,
    compensation: Optional[dict] = None,
    registry: Optional[StrategyRegistry] = None,
    employee_store: Optional[InMemoryEmployeeStore] = None,
) -> Container:
    compensation = compensation or {}
    base = require_non_negative(compensation.get("base_pay", BASE_PAY), "base_pay")
    cap = require_non_negative(compensation.get("regular_hours_cap", REGULAR_HOURS_CAP), "regular_hours_cap")

    registry = registry or default_registry()
    hours_calculator = RegularHoursCalculator(cap)
    employee_store = employee_store or InMemoryEmployeeStore()

    # One hours calculator shared by payroll and reporting.
    pay_calculator = PayCalculator(hours_calculator, base=base)
    hour_reporter = HourReporter(hours_calculator)
    employee_service = EmployeeService(employee_store, employee_store)
    report_service = CompensationReportService(registry, pay_calculator, hour_reporter)

    return Container(
        currency=str(compensation.get("currency", DEFAULT_CURRENCY)),
        registry=registry,
        hours_calculator=hours_calculator,
        employee_store=employee_store,
        pay_calculator=pay_calculator,
        hour_reporter=hour_reporter,
        employee_service=employee_service,
        report_service=report_service,
    )
