from __future__ import annotations

import logging
from decimal import Decimal

from flask import Flask, Response, jsonify, request

from ..core.exceptions import PersistenceError, UnknownRoleError, ValidationError
from ..container import Container
from ..employees.model import EmployeeRecord
from ..payroll.model import PayResult
from ..reporting.model import HourReport

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _employee(data: dict) -> EmployeeRecord:
        for key in ("employee_id", "name", "department", "role"):
            if key not in data:
                raise ValidationError(f"Missing field: {key}")
        return container.registry.build_record(
            employee_id=data["employee_id"],
            name=data["name"],
            department=data["department"],
            role=data["role"],
            hours_worked=data.get("hours_worked", 0),
            title=data.get("title"),
        )

    def _pay_json(result: PayResult) -> dict:
        return {
            "employee_id": result.employee_id,
            "role": result.role,
            "regular_hours": str(result.regular_hours),
            "amount": str(result.amount),
            "currency": container.currency,
        }

    def _hours_json(report: HourReport) -> dict:
        return {
            "employee_id": report.employee_id,
            "regular_hours": str(report.regular_hours),
            "overtime_hours": str(report.overtime_hours),
            "summary": report.formatted_summary,
        }

    @app.errorhandler(ValidationError)
    def _validation_error(e):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(UnknownRoleError)
    def _unknown_role(e):
        return jsonify({"success": False, "message": str(e), "role": e.role}), 422

    @app.errorhandler(PersistenceError)
    def _persistence_error(e):
        logger.error("persistence failure: %s", e)
        return jsonify({"success": False, "message": str(e)}), 503

    @app.route("/api/pay", methods=["POST"], endpoint="api_pay")
    def api_pay():
        data = _json_body()
        employee = _employee(data)
        strategy = container.registry.resolve(employee)
        result = container.pay_calculator.compute(employee, strategy, data.get("allowance", Decimal("0")))
        return jsonify({"success": True, "pay": _pay_json(result)})

    @app.route("/api/hours", methods=["POST"], endpoint="api_hours")
    def api_hours():
        employee = _employee(_json_body())
        return jsonify({"success": True, "hours": _hours_json(container.hour_reporter.report(employee))})

    @app.route("/api/employees/<employee_id>", methods=["POST"], endpoint="api_save_employee")
    def api_save_employee(employee_id: str):
        container.employee_service.save_fields(employee_id, _json_body())
        return Response(status=204)

    @app.route("/api/employees/<employee_id>/title", methods=["PUT"], endpoint="api_update_title")
    def api_update_title(employee_id: str):
        data = _json_body()
        container.employee_service.update_title(employee_id=employee_id, title=data.get("title", ""))
        return Response(status=204)

    @app.route("/api/report.csv", methods=["POST"], endpoint="api_report_csv")
    def api_report_csv():
        data = request.get_json(silent=True)
        if not isinstance(data, list):
            raise ValidationError("Request body must be a JSON list of employees")

        if not all(isinstance(item, dict) for item in data):
            raise ValidationError("Each employee must be a JSON object")

        employees = [_employee(item) for item in data]
        allowances = {e.employee_id: item["allowance"] for e, item in zip(employees, data) if "allowance" in item}
        report = container.report_service.build_report(employees, allowances=allowances)

        return Response(
            container.report_service.to_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=compensation_report.csv"},
        )
