"""Example: use the service layer without Flask.

Lists the stores of user 1 and the payroll checks of their first employee.
"""

import importlib

from config import get_settings_module

from src.grocery_payroll.grocery_payroll.container import build_container
from src.grocery_payroll.grocery_payroll.logging_config import configure_logging


def main():
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(api_config=settings.API_CONFIG)

    for store in container.store_service.list_stores(1):
        print(store.store_id, store.store_name, store.address)
        for employee in container.employee_service.list_employees(store.store_id)[:1]:
            for check in container.payroll_check_service.list_checks(employee.id):
                print("  ", check.check_number, check.status.value, check.check_amount)


if __name__ == "__main__":
    main()
