from __future__ import annotations

import logging
import secrets
import string
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import require_iso_date
from ..common.validators import require_amount, require_min_length, require_non_empty
from ..core.constants import CHECK_NUMBER_LENGTH, CHECK_NUMBER_PREFIX, MIN_PHONE_LENGTH
from ..core.enums import CheckStatus
from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from .model import NewPayrollCheck, PayrollCheck
from .repository import PayrollCheckRepository

logger = logging.getLogger(__name__)

_CHECK_NUMBER_ALPHABET = string.ascii_lowercase + string.digits


def generate_check_number() -> str:
    """CHK followed by 8 random lowercase alphanumerics, e.g. CHK3f9a0c1b."""
    suffix = "".join(secrets.choice(_CHECK_NUMBER_ALPHABET) for _ in range(CHECK_NUMBER_LENGTH))
    return f"{CHECK_NUMBER_PREFIX}{suffix}"


class PayrollCheckService:
    def __init__(
        self,
        checks: PayrollCheckRepository,
        *,
        check_number_factory: Optional[Callable[[], str]] = None,
    ):
        self._checks = checks
        self._check_number_factory = check_number_factory or generate_check_number

    def list_checks(self, employee_id: int) -> Sequence[PayrollCheck]:
        return list(self._checks.list_for_employee(int(employee_id)))

    def create_check(
        self,
        *,
        employee_id: int,
        phone_number: str,
        check_amount: str,
        transaction_date: str,
        location: str,
        status: str = CheckStatus.PENDING.value,
    ) -> NewPayrollCheck:
        phone_number = require_min_length(phone_number, "Phone number", MIN_PHONE_LENGTH)
        amount = require_amount(check_amount, "Check amount")
        transaction_date = require_iso_date(transaction_date, "Transaction date")
        location = require_non_empty(location, "Location")
        status = require_non_empty(status, "Status")

        try:
            check_status = CheckStatus(status.upper())
        except ValueError:
            raise ValidationError("Status is not valid")

        new_check = NewPayrollCheck(
            employee_id=int(employee_id),
            phone_number=phone_number,
            check_number=self._check_number_factory(),
            check_amount=amount,
            transaction_date=transaction_date,
            status=check_status,
            location=location,
        )
        self._checks.create(new_check)
        logger.info("Created payroll check %s for employee %s", new_check.check_number, employee_id)
        return new_check

    def refresh(self, check: PayrollCheck) -> PayrollCheck:
        """Return the backend's current copy of `check`."""
        for current in self._checks.list_for_employee(check.employee_id):
            if current.check_id == check.check_id:
                return current
        raise NotFoundError(f"Payroll check {check.check_number} no longer exists")

    def _transition(self, check: PayrollCheck, status: CheckStatus) -> PayrollCheck:
        if not check.is_pending:
            raise InvalidTransitionError(
                f"Check {check.check_number} is {check.status.value}; only PENDING checks can change status"
            )
        updated = check.with_status(status)
        self._checks.update(updated)
        logger.info("Payroll check %s -> %s", check.check_number, status.value)
        return updated

    def mark_completed(self, check: PayrollCheck) -> PayrollCheck:
        return self._transition(check, CheckStatus.COMPLETED)

    def mark_rejected(self, check: PayrollCheck) -> PayrollCheck:
        return self._transition(check, CheckStatus.REJECTED)
