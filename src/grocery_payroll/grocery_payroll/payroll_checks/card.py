from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import format_display_date
from ..core.enums import CheckStatus
from .model import PayrollCheck

_BADGE_CLASSES = {
    CheckStatus.COMPLETED: "bg-success",
    CheckStatus.REJECTED: "bg-danger",
    CheckStatus.PENDING: "bg-warning text-dark",
}


@dataclass(frozen=True)
class PayrollCard:
    """Display data for one check card; Pay/Reject only show on PENDING checks."""

    check_id: int
    title: str
    amount: str
    phone_number: str
    status: str
    badge_class: str
    location: str
    transaction_date: str
    created: str
    show_actions: bool

    @classmethod
    def from_check(cls, check: PayrollCheck) -> "PayrollCard":
        return cls(
            check_id=check.check_id,
            title=f"Check #{check.check_number}",
            amount=f"${check.check_amount:,.2f}",
            phone_number=check.phone_number,
            status=check.status.value,
            badge_class=_BADGE_CLASSES.get(check.status, "bg-secondary"),
            location=check.location,
            transaction_date=format_display_date(check.transaction_date),
            created=format_display_date(check.created_at),
            show_actions=check.is_pending,
        )
