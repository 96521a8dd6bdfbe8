from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from src.grocery_payroll.grocery_payroll.blocked_phones.model import BlockedPhone
from src.grocery_payroll.grocery_payroll.container import assemble
from src.grocery_payroll.grocery_payroll.core.enums import CheckStatus
from src.grocery_payroll.grocery_payroll.core.exceptions import ApiError
from src.grocery_payroll.grocery_payroll.employees.model import Employee
from src.grocery_payroll.grocery_payroll.payroll_checks.model import NewPayrollCheck, PayrollCheck
from src.grocery_payroll.grocery_payroll.stores.model import Store


class InMemoryStores:
    def __init__(self, stores: Optional[List[Store]] = None):
        self.stores = list(stores or [])
        self.fail = False

    def list_for_user(self, user_id: int):
        if self.fail:
            raise ApiError("store list down", endpoint="/store/get")
        return [s for s in self.stores if s.user_id == user_id]

    def create(self, *, user_id: int, store_name: str, address: str) -> None:
        if self.fail:
            raise ApiError("store create down", endpoint="/store/create")
        self.stores.append(
            Store(store_id=len(self.stores) + 1, user_id=user_id, store_name=store_name, address=address)
        )


class InMemoryEmployees:
    def __init__(self, employees: Optional[List[Employee]] = None):
        self.employees = list(employees or [])
        self.list_calls = 0
        self.fail_create = False

    def list_for_store(self, store_id: int):
        self.list_calls += 1
        return [e for e in self.employees if e.store_id == store_id]

    def create(self, *, store_id: int, full_name: str, employee_code: str, mobile_number: str) -> None:
        if self.fail_create:
            raise ApiError("duplicate mobile", endpoint="/employee/create", status_code=409)
        self.employees.append(
            Employee(
                id=len(self.employees) + 1,
                store_id=store_id,
                full_name=full_name,
                employee_code=employee_code,
                mobile_number=mobile_number,
            )
        )


class InMemoryChecks:
    """Fake backend for payroll checks; records every call in `calls`."""

    def __init__(self, calls: List[tuple], checks: Optional[List[PayrollCheck]] = None):
        self.calls = calls
        self.checks: Dict[int, PayrollCheck] = {c.check_id: c for c in (checks or [])}
        self.fail_update = False

    def list_for_employee(self, employee_id: int):
        return [c for c in self.checks.values() if c.employee_id == employee_id]

    def create(self, check: NewPayrollCheck) -> None:
        self.calls.append(("create", check.check_number))
        check_id = max(self.checks, default=0) + 1
        self.checks[check_id] = PayrollCheck(
            check_id=check_id,
            employee_id=check.employee_id,
            phone_number=check.phone_number,
            check_number=check.check_number,
            check_amount=check.check_amount,
            transaction_date=check.transaction_date,
            status=check.status,
            location=check.location,
            created_at="2025-03-01T09:00:00Z",
        )

    def update(self, check: PayrollCheck) -> None:
        self.calls.append(("update", check.check_id, check.status))
        if self.fail_update:
            raise ApiError("update failed", endpoint="/payroll-check/update", status_code=500)
        self.checks[check.check_id] = check


class FakeBlockedPhones:
    def __init__(self, calls: List[tuple], blocked: Optional[set] = None):
        self.calls = calls
        self.blocked = set(blocked or ())
        self.records: List[BlockedPhone] = []
        self.fail_check = False
        self.fail_add = False

    def is_blocked(self, phone_number: str) -> bool:
        self.calls.append(("check", phone_number))
        if self.fail_check:
            raise ApiError("check failed", endpoint="/blocked-phone/check")
        return phone_number in self.blocked

    def add(self, record: BlockedPhone) -> None:
        self.calls.append(("add", record.phone_number, record.reason))
        if self.fail_add:
            raise ApiError("add failed", endpoint="/blocked-phone/add", status_code=500)
        self.records.append(record)
        self.blocked.add(record.phone_number)


def make_check(check_id: int = 1, *, employee_id: int = 7, phone: str = "5551234567",
               status: CheckStatus = CheckStatus.PENDING) -> PayrollCheck:
    return PayrollCheck(
        check_id=check_id,
        employee_id=employee_id,
        phone_number=phone,
        check_number=f"CHKtest{check_id:04d}",
        check_amount=250.5,
        transaction_date="2025-03-01",
        status=status,
        location="Main St",
        created_at="2025-03-01T09:00:00Z",
    )


@pytest.fixture
def calls() -> List[tuple]:
    return []


@pytest.fixture
def employee() -> Employee:
    return Employee(id=7, store_id=3, full_name="Ana Ruiz", employee_code="E-007", mobile_number="5551234567")


@pytest.fixture
def stores_repo() -> InMemoryStores:
    return InMemoryStores([Store(store_id=3, user_id=1, store_name="Corner Market", address="1 Main St")])


@pytest.fixture
def employees_repo(employee) -> InMemoryEmployees:
    return InMemoryEmployees([employee])


@pytest.fixture
def checks_repo(calls) -> InMemoryChecks:
    return InMemoryChecks(calls, [make_check(1)])


@pytest.fixture
def blocked_repo(calls) -> FakeBlockedPhones:
    return FakeBlockedPhones(calls)


@pytest.fixture
def container(stores_repo, employees_repo, checks_repo, blocked_repo):
    return assemble(
        stores_repo=stores_repo,
        employees_repo=employees_repo,
        checks_repo=checks_repo,
        blocked_phones_repo=blocked_repo,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.grocery_payroll.grocery_payroll.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    with client.session_transaction() as sess:
        sess["user"] = {"user_id": 1, "full_name": "Owner", "username": "owner", "email": "o@example.com"}
    return client
