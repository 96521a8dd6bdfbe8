from __future__ import annotations

from dataclasses import dataclass

from .api.client import ApiConfig, BackendClient
from .blocked_phones.http_blocked_phone_repository import HttpBlockedPhoneRepository
from .blocked_phones.repository import BlockedPhoneRepository
from .blocked_phones.service import BlockedPhoneService
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT
from .employees.context import EmployeeContext
from .employees.http_employee_repository import HttpEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll_checks.http_payroll_check_repository import HttpPayrollCheckRepository
from .payroll_checks.repository import PayrollCheckRepository
from .payroll_checks.service import PayrollCheckService
from .payroll_checks.workflow import CheckActionWorkflow
from .stores.http_store_repository import HttpStoreRepository
from .stores.repository import StoreRepository
from .stores.service import StoreService


@dataclass(frozen=True)
class Container:
    stores_repo: StoreRepository
    employees_repo: EmployeeRepository
    checks_repo: PayrollCheckRepository
    blocked_phones_repo: BlockedPhoneRepository

    employee_context: EmployeeContext

    store_service: StoreService
    employee_service: EmployeeService
    payroll_check_service: PayrollCheckService
    blocked_phone_service: BlockedPhoneService
    check_action_workflow: CheckActionWorkflow


def assemble(
    *,
    stores_repo: StoreRepository,
    employees_repo: EmployeeRepository,
    checks_repo: PayrollCheckRepository,
    blocked_phones_repo: BlockedPhoneRepository,
) -> Container:
    employee_context = EmployeeContext()

    store_service = StoreService(stores_repo)
    employee_service = EmployeeService(employees_repo, employee_context)
    payroll_check_service = PayrollCheckService(checks_repo)
    blocked_phone_service = BlockedPhoneService(blocked_phones_repo)
    check_action_workflow = CheckActionWorkflow(payroll_check_service, blocked_phone_service)

    return Container(
        stores_repo=stores_repo,
        employees_repo=employees_repo,
        checks_repo=checks_repo,
        blocked_phones_repo=blocked_phones_repo,
        employee_context=employee_context,
        store_service=store_service,
        employee_service=employee_service,
        payroll_check_service=payroll_check_service,
        blocked_phone_service=blocked_phone_service,
        check_action_workflow=check_action_workflow,
    )


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config.get("base_url", DEFAULT_API_BASE_URL)),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT)),
    )
    client = BackendClient(config)

    return assemble(
        stores_repo=HttpStoreRepository(client),
        employees_repo=HttpEmployeeRepository(client),
        checks_repo=HttpPayrollCheckRepository(client),
        blocked_phones_repo=HttpBlockedPhoneRepository(client),
    )
