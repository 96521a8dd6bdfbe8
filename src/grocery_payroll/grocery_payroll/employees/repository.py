from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_for_store(self, store_id: int) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, store_id: int, full_name: str, employee_code: str, mobile_number: str) -> None:
        raise NotImplementedError
