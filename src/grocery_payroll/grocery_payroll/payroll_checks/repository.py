from __future__ import annotations

from typing import Protocol, Sequence

from .model import NewPayrollCheck, PayrollCheck


class PayrollCheckRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[PayrollCheck]:
        raise NotImplementedError

    def create(self, check: NewPayrollCheck) -> None:
        raise NotImplementedError

    def update(self, check: PayrollCheck) -> None:
        raise NotImplementedError
