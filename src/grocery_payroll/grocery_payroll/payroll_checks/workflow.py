from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from ..blocked_phones.service import BlockedPhoneService
from ..common.validators import require_non_empty
from ..core.enums import CheckAction, Dialog
from ..core.exceptions import InvalidTransitionError
from .model import PayrollCheck
from .service import PayrollCheckService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionState:
    """View state of the pay/reject dialogs on the payroll checks page.

    Each dialog has its own visibility flag; they only share the selected check
    and the action type.
    """

    selected_check: Optional[PayrollCheck] = None
    action_type: Optional[CheckAction] = None
    is_block_dialog_open: bool = False
    is_confirm_dialog_open: bool = False
    is_blocked_alert_open: bool = False
    reason: str = ""

    @property
    def can_confirm(self) -> bool:
        return self.is_confirm_dialog_open and self.selected_check is not None

    def to_session(self) -> Dict[str, Any]:
        return {
            "selected_check": self.selected_check.to_dict() if self.selected_check else None,
            "action_type": self.action_type.value if self.action_type else None,
            "is_block_dialog_open": self.is_block_dialog_open,
            "is_confirm_dialog_open": self.is_confirm_dialog_open,
            "is_blocked_alert_open": self.is_blocked_alert_open,
            "reason": self.reason,
        }

    @classmethod
    def from_session(cls, data: Optional[Dict[str, Any]]) -> "ActionState":
        if not data:
            return cls()
        check = data.get("selected_check")
        action = data.get("action_type")
        return cls(
            selected_check=PayrollCheck.from_api(check) if check else None,
            action_type=CheckAction(action) if action else None,
            is_block_dialog_open=bool(data.get("is_block_dialog_open")),
            is_confirm_dialog_open=bool(data.get("is_confirm_dialog_open")),
            is_blocked_alert_open=bool(data.get("is_blocked_alert_open")),
            reason=data.get("reason") or "",
        )


class CheckActionWorkflow:
    """Pay / reject decision tree for a single payroll check.

    pay:    block check -> (blocked alert -> proceed) -> confirm -> COMPLETED
    reject: reason -> confirm -> REJECTED -> block check -> block add (if not blocked)

    The reject chain is three independent backend calls; a failure part way
    leaves the earlier calls applied.
    """

    def __init__(self, checks: PayrollCheckService, blocked_phones: BlockedPhoneService):
        self._checks = checks
        self._blocked_phones = blocked_phones

    def start(self, check: PayrollCheck, action: CheckAction) -> ActionState:
        if not check.is_pending:
            raise InvalidTransitionError(f"Check {check.check_number} is already {check.status.value}")

        state = ActionState(selected_check=check, action_type=action)
        if action == CheckAction.PAY:
            if self._blocked_phones.is_blocked(check.phone_number):
                logger.info("Pay on blocked phone %s needs override", check.phone_number)
                return replace(state, is_blocked_alert_open=True)
            return replace(state, is_confirm_dialog_open=True)

        return replace(state, is_block_dialog_open=True)

    def submit_reason(self, state: ActionState, reason: str) -> ActionState:
        if state.action_type != CheckAction.REJECT or not state.is_block_dialog_open:
            raise InvalidTransitionError("No rejection is waiting for a reason")
        reason = require_non_empty(reason, "Reason")
        return replace(state, reason=reason, is_confirm_dialog_open=True)

    def proceed_anyway(self, state: ActionState) -> ActionState:
        if not state.is_blocked_alert_open:
            raise InvalidTransitionError("No blocked phone warning is open")
        return replace(state, is_blocked_alert_open=False, is_confirm_dialog_open=True)

    def cancel(self, state: ActionState, dialog: Dialog) -> ActionState:
        if dialog == Dialog.BLOCK_REASON:
            return replace(state, is_block_dialog_open=False)
        if dialog == Dialog.BLOCKED_ALERT:
            return replace(state, is_blocked_alert_open=False)
        return replace(state, is_confirm_dialog_open=False)

    def confirm(self, state: ActionState) -> ActionState:
        """Run the pending action; returns a closed state on success.

        ApiError from any step propagates and the caller keeps the current state.
        """
        if not state.is_confirm_dialog_open:
            raise InvalidTransitionError("Nothing to confirm")
        if state.selected_check is None:
            return state
        # The session copy may be stale; the status rule applies to the backend's copy.
        check = self._checks.refresh(state.selected_check)

        if state.action_type == CheckAction.PAY:
            self._checks.mark_completed(check)
        elif state.action_type == CheckAction.REJECT:
            reason = require_non_empty(state.reason, "Reason")
            self._checks.mark_rejected(check)
            if self._blocked_phones.is_blocked(check.phone_number):
                logger.info("Phone %s already blocked; skipping block record", check.phone_number)
            else:
                self._blocked_phones.block(check.phone_number, reason)
        else:
            raise InvalidTransitionError("Unknown action")

        return ActionState()
