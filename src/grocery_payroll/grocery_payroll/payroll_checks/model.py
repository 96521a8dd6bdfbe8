from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from ..core.enums import CheckStatus


@dataclass(frozen=True)
class PayrollCheck:
    """A payroll payment record for one employee."""

    check_id: int
    employee_id: int
    phone_number: str
    check_number: str
    check_amount: float
    transaction_date: str
    status: CheckStatus
    location: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.status == CheckStatus.PENDING

    def with_status(self, status: CheckStatus) -> "PayrollCheck":
        return replace(self, status=status)

    @classmethod
    def from_api(cls, row: Dict[str, Any]) -> "PayrollCheck":
        return cls(
            check_id=int(row["check_id"]),
            employee_id=int(row["employee_id"]),
            phone_number=row.get("phone_number") or "",
            check_number=row.get("check_number") or "",
            check_amount=float(row.get("check_amount") or 0),
            transaction_date=row.get("transaction_date") or "",
            status=CheckStatus(row.get("status") or CheckStatus.PENDING.value),
            location=row.get("location") or "",
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_update_payload(self) -> Dict[str, Any]:
        """Body of PUT /payroll-check/update (timestamps are owned by the backend)."""
        return {
            "check_id": self.check_id,
            "employee_id": self.employee_id,
            "phone_number": self.phone_number,
            "check_number": self.check_number,
            "check_amount": self.check_amount,
            "transaction_date": self.transaction_date,
            "status": self.status.value,
            "location": self.location,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass(frozen=True)
class NewPayrollCheck:
    employee_id: int
    phone_number: str
    check_number: str
    check_amount: float
    transaction_date: str
    status: CheckStatus
    location: str

    def to_create_payload(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "phone_number": self.phone_number,
            "check_number": self.check_number,
            "check_amount": self.check_amount,
            "transaction_date": self.transaction_date,
            "status": self.status.value,
            "location": self.location,
        }
