from __future__ import annotations

from typing import List

from ..api.client import BackendClient
from ..api.payloads import parse_rows
from .model import NewPayrollCheck, PayrollCheck
from .repository import PayrollCheckRepository


class HttpPayrollCheckRepository(PayrollCheckRepository):
    LIST_PATH = "/payroll-check/get"
    CREATE_PATH = "/payroll-check/create"
    UPDATE_PATH = "/payroll-check/update"

    def __init__(self, client: BackendClient):
        self._client = client

    def list_for_employee(self, employee_id: int) -> List[PayrollCheck]:
        data = self._client.post(self.LIST_PATH, {"employee_id": int(employee_id)})
        return parse_rows(data, PayrollCheck.from_api, endpoint=self.LIST_PATH)

    def create(self, check: NewPayrollCheck) -> None:
        self._client.post(self.CREATE_PATH, check.to_create_payload())

    def update(self, check: PayrollCheck) -> None:
        self._client.put(self.UPDATE_PATH, check.to_update_payload())
