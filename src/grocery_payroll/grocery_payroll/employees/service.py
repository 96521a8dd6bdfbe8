from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PHONE_LENGTH
from ..core.exceptions import NotFoundError
from .context import EmployeeContext
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, context: EmployeeContext):
        self._employees = employees
        self._context = context

    def list_employees(self, store_id: int) -> Sequence[Employee]:
        return list(self._employees.list_for_store(int(store_id)))

    def create_employee(self, *, store_id: int, full_name: str, employee_code: str, mobile_number: str) -> None:
        full_name = require_non_empty(full_name, "Full name")
        employee_code = require_non_empty(employee_code, "Employee code")
        mobile_number = require_min_length(mobile_number, "Mobile number", MIN_PHONE_LENGTH)

        self._employees.create(
            store_id=int(store_id),
            full_name=full_name,
            employee_code=employee_code,
            mobile_number=mobile_number,
        )
        logger.info("Created employee %s in store %s", employee_code, store_id)

    def find_employee(self, *, store_id: int, employee_id: int) -> Employee:
        for employee in self._employees.list_for_store(int(store_id)):
            if employee.id == int(employee_id):
                return employee
        raise NotFoundError(f"Employee {employee_id} not found in store {store_id}")

    def select_employee(self, *, store_id: int, employee_id: int) -> Employee:
        employee = self.find_employee(store_id=store_id, employee_id=employee_id)
        self._context.select(employee)
        return employee

    def resolve_selected(self, *, store_id: int, employee_id: int) -> Employee:
        """Employee for the payroll checks page.

        Uses the shared context when it points at this employee, otherwise refetches
        the store's employees and updates the context.
        """
        employee = self._context.get_if_matches(employee_id)
        if employee is not None:
            return employee
        return self.select_employee(store_id=store_id, employee_id=employee_id)
