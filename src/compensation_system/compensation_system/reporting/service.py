from __future__ import annotations

import io
import logging
from decimal import Decimal
from typing import Iterable, Mapping, Optional

import pandas as pd

from ..common.money import format_hours, to_money
from ..compensation.registry import StrategyRegistry
from ..employees.model import EmployeeId, EmployeeRecord
from ..payroll.calculator import PayCalculator
from .hour_reporter import HourReporter
from .model import ReportData

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "employee_id",
    "name",
    "department",
    "role",
    "regular_hours",
    "overtime_hours",
    "amount",
]


class CompensationReportService:
    """Combined pay + hours table for a batch of employees.

    Pay comes from PayCalculator, hours from HourReporter; this service only
    joins their results.
    """

    def __init__(
        self,
        registry: StrategyRegistry,
        pay_calculator: PayCalculator,
        hour_reporter: HourReporter,
    ):
        self._registry = registry
        self._pay = pay_calculator
        self._hours = hour_reporter

    def build_report(
        self,
        employees: Iterable[EmployeeRecord],
        *,
        allowances: Optional[Mapping[EmployeeId, Decimal]] = None,
    ) -> ReportData:
        allowances = allowances or {}
        out_rows: list[dict] = []
        summary_map: dict[str, dict] = {}

        for e in employees:
            strategy = self._registry.resolve(e)
            pay = self._pay.compute(e, strategy, allowances.get(e.employee_id, Decimal("0")))
            hours = self._hours.report(e)

            out_rows.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "department": e.department,
                    "role": e.role,
                    "regular_hours": format_hours(hours.regular_hours),
                    "overtime_hours": format_hours(hours.overtime_hours),
                    "amount": pay.amount,
                }
            )

            s = summary_map.get(e.department)
            if not s:
                s = {
                    "department": e.department,
                    "headcount": 0,
                    "total_regular_hours": Decimal("0"),
                    "total_pay": Decimal("0"),
                }
                summary_map[e.department] = s
            s["headcount"] += 1
            s["total_regular_hours"] += hours.regular_hours
            s["total_pay"] += pay.amount

        summary = []
        for s in summary_map.values():
            summary.append(
                {
                    "department": s["department"],
                    "headcount": s["headcount"],
                    "total_regular_hours": format_hours(s["total_regular_hours"]),
                    "total_pay": to_money(s["total_pay"]),
                }
            )

        summary.sort(key=lambda x: x["total_pay"], reverse=True)
        logger.info("built compensation report rows=%d departments=%d", len(out_rows), len(summary))
        return ReportData(rows=out_rows, summary=summary)

    @staticmethod
    def to_dataframe(report: ReportData) -> pd.DataFrame:
        return pd.DataFrame(report.rows, columns=REPORT_COLUMNS)

    def to_csv(self, report: ReportData) -> bytes:
        out = io.StringIO()
        self.to_dataframe(report).to_csv(out, index=False)
        return out.getvalue().encode("utf-8-sig")
