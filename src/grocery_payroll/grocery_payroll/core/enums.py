from __future__ import annotations

from enum import Enum


class CheckStatus(str, Enum):
    """Lifecycle of a payroll check.

    PENDING is the only state a check can leave; COMPLETED and REJECTED are final.
    """

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


class CheckAction(str, Enum):
    PAY = "pay"
    REJECT = "reject"


class Dialog(str, Enum):
    """Modal panels layered on the payroll checks page."""

    BLOCK_REASON = "block_reason"
    CONFIRM = "confirm"
    BLOCKED_ALERT = "blocked_alert"
