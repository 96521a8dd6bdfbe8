from __future__ import annotations

from typing import List

from ..api.client import BackendClient
from ..api.payloads import parse_rows
from .model import Employee
from .repository import EmployeeRepository


class HttpEmployeeRepository(EmployeeRepository):
    LIST_PATH = "/employee/get"
    CREATE_PATH = "/employee/create"

    def __init__(self, client: BackendClient):
        self._client = client

    def list_for_store(self, store_id: int) -> List[Employee]:
        # The backend filters employees by store through the "id" field.
        data = self._client.post(self.LIST_PATH, {"id": int(store_id)})
        return parse_rows(data, Employee.from_api, endpoint=self.LIST_PATH)

    def create(self, *, store_id: int, full_name: str, employee_code: str, mobile_number: str) -> None:
        self._client.post(
            self.CREATE_PATH,
            {
                "store_id": int(store_id),
                "full_name": full_name,
                "employee_code": employee_code,
                "mobile_number": mobile_number,
            },
        )
