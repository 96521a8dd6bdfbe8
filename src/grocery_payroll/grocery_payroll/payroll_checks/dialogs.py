from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..core.enums import CheckAction, Dialog
from .workflow import ActionState


@dataclass(frozen=True)
class DialogView:
    title: str
    description: str
    submit_label: str
    cancel_label: str = "Cancel"


BLOCK_REASON_DIALOG = DialogView(
    title="Block Phone Number",
    description="Please provide a reason for blocking this phone number.",
    submit_label="Continue",
)

BLOCKED_ALERT_DIALOG = DialogView(
    title="Warning: Blocked Phone Number",
    description="This phone number is currently blocked. Are you sure you want to proceed with the payment?",
    submit_label="Proceed Anyway",
)

PAY_CONFIRMATION_DIALOG = DialogView(
    title="Confirm Payment",
    description="Are you sure you want to mark this check as paid?",
    submit_label="Confirm",
)

REJECT_CONFIRMATION_DIALOG = DialogView(
    title="Confirm Rejection",
    description="Are you sure you want to reject this check and block the phone number?",
    submit_label="Confirm",
)


def confirmation_dialog(action: Optional[CheckAction]) -> DialogView:
    if action == CheckAction.PAY:
        return PAY_CONFIRMATION_DIALOG
    return REJECT_CONFIRMATION_DIALOG


def open_dialogs(state: ActionState) -> Dict[str, DialogView]:
    """Dialogs to render, in stacking order (later ones on top)."""
    dialogs: Dict[str, DialogView] = {}
    if state.is_block_dialog_open:
        dialogs[Dialog.BLOCK_REASON.value] = BLOCK_REASON_DIALOG
    if state.is_blocked_alert_open:
        dialogs[Dialog.BLOCKED_ALERT.value] = BLOCKED_ALERT_DIALOG
    if state.is_confirm_dialog_open:
        dialogs[Dialog.CONFIRM.value] = confirmation_dialog(state.action_type)
    return dialogs
