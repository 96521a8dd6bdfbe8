from __future__ import annotations

import logging
from typing import Optional

from .model import Employee

logger = logging.getLogger(__name__)


class EmployeeContext:
    """Process-wide pointer to the employee currently being viewed.

    Shared by the employee list (writer) and the payroll checks page (reader).
    Last write wins.
    """

    def __init__(self) -> None:
        self._selected: Optional[Employee] = None

    @property
    def selected(self) -> Optional[Employee]:
        return self._selected

    def select(self, employee: Optional[Employee]) -> None:
        self._selected = employee
        if employee is not None:
            logger.debug("Selected employee %s (%s)", employee.id, employee.employee_code)

    def clear(self) -> None:
        self._selected = None

    def get_if_matches(self, employee_id: int) -> Optional[Employee]:
        if self._selected is not None and self._selected.id == int(employee_id):
            return self._selected
        return None
