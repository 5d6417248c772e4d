from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import require_non_empty
from ..core.exceptions import PersistenceError, ValidationError
from .model import EmployeeId, EmployeeRecord, clean_fields, require_employee_id
from .repository import EmployeePersistenceGateway, EmployeeTitle, EmployeeTitleGateway

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: persist employee data through narrow gateways.

    One gateway call per request; failures are logged and re-raised as-is.
    """

    def __init__(self, gateway: EmployeePersistenceGateway, title_gateway: EmployeeTitleGateway):
        self._gateway = gateway
        self._titles = title_gateway

    def save_employee(self, record: EmployeeRecord) -> None:
        self.save_fields(record.employee_id, record.persistable_fields())

    def save_fields(self, employee_id: EmployeeId, fields: Mapping[str, Any]) -> None:
        employee_id = require_employee_id(employee_id)
        payload = dict(fields)
        body_id = payload.pop("employee_id", None)
        if body_id is not None and str(body_id) != str(employee_id):
            raise ValidationError(f"employee_id {body_id!r} does not match {employee_id!r}")
        if not payload:
            raise ValidationError("Nothing to save")

        payload = clean_fields(payload)
        try:
            self._gateway.save(employee_id, payload)
        except PersistenceError:
            logger.warning("save failed for employee %s", employee_id)
            raise

    def update_title(self, *, employee_id: EmployeeId, title: str) -> None:
        employee_id = require_employee_id(employee_id)
        record = EmployeeTitle(employee_id=employee_id, title=require_non_empty(title, "title"))
        try:
            self._titles.save_title(record)
        except PersistenceError:
            logger.warning("title update failed for employee %s", employee_id)
            raise
