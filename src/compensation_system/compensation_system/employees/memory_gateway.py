from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Mapping, Optional

from ..core.exceptions import PersistenceError
from .model import EmployeeId
from .repository import EmployeePersistenceGateway, EmployeeReader, EmployeeTitle, EmployeeTitleGateway

logger = logging.getLogger(__name__)


class InMemoryEmployeeStore(EmployeePersistenceGateway, EmployeeTitleGateway, EmployeeReader):
    """Process-local backing store.

    Saves merge the given fields into whatever is already stored for the id,
    so a title-only save leaves the other fields alone. ``fail_with`` lets a
    caller simulate backing-store outages.
    """

    def __init__(self, *, fail_with: Optional[Callable[[EmployeeId], Optional[Exception]]] = None):
        self._rows: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()
        self._fail_with = fail_with
        self.save_calls = 0

    def save(self, employee_id: EmployeeId, fields: Mapping[str, Any]) -> None:
        key = str(employee_id)
        with self._lock:
            self.save_calls += 1
            self._raise_if_failing(employee_id)
            row = self._rows.setdefault(key, {"employee_id": employee_id})
            row.update(copy.deepcopy(dict(fields)))
        logger.debug("saved employee %s fields=%s", key, sorted(fields))

    def save_title(self, record: EmployeeTitle) -> None:
        self.save(record.employee_id, {"title": record.title})

    def get_fields(self, employee_id: EmployeeId) -> Optional[dict[str, Any]]:
        with self._lock:
            row = self._rows.get(str(employee_id))
            return copy.deepcopy(row) if row else None

    def _raise_if_failing(self, employee_id: EmployeeId) -> None:
        if not self._fail_with:
            return
        err = self._fail_with(employee_id)
        if err is None:
            return
        if isinstance(err, PersistenceError):
            raise err
        raise PersistenceError(f"Backing store failed for employee {employee_id}: {err}") from err
