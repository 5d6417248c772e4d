from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

from .model import EmployeeId


@dataclass(frozen=True)
class EmployeeTitle:
    """Narrowed shape for callers that only change a title."""

    employee_id: EmployeeId
    title: str


class EmployeePersistenceGateway(Protocol):
    """Save a subset of an employee's fields.

    Note (ISP): callers depend on this one method, not on a full repository.
    Implementations raise PersistenceError on backing-store failure and do
    not retry.
    """

    def save(self, employee_id: EmployeeId, fields: Mapping[str, Any]) -> None:
        raise NotImplementedError


class EmployeeTitleGateway(Protocol):
    def save_title(self, record: EmployeeTitle) -> None:
        raise NotImplementedError


class EmployeeReader(Protocol):
    def get_fields(self, employee_id: EmployeeId) -> Optional[dict[str, Any]]:
        raise NotImplementedError
