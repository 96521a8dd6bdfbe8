from __future__ import annotations

import pytest

from conftest import make_check
from src.grocery_payroll.grocery_payroll.blocked_phones.service import BlockedPhoneService
from src.grocery_payroll.grocery_payroll.core.enums import CheckAction, CheckStatus, Dialog
from src.grocery_payroll.grocery_payroll.core.exceptions import (
    ApiError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from src.grocery_payroll.grocery_payroll.payroll_checks.service import PayrollCheckService
from src.grocery_payroll.grocery_payroll.payroll_checks.workflow import ActionState, CheckActionWorkflow


@pytest.fixture
def workflow(checks_repo, blocked_repo):
    return CheckActionWorkflow(PayrollCheckService(checks_repo), BlockedPhoneService(blocked_repo))


def test_pay_unblocked_goes_straight_to_confirm(workflow, checks_repo, calls):
    state = workflow.start(make_check(1), CheckAction.PAY)

    assert state.is_confirm_dialog_open
    assert not state.is_blocked_alert_open

    done = workflow.confirm(state)

    assert done == ActionState()
    assert checks_repo.checks[1].status == CheckStatus.COMPLETED
    assert calls == [("check", "5551234567"), ("update", 1, CheckStatus.COMPLETED)]


def test_pay_blocked_requires_proceed_anyway(workflow, blocked_repo, checks_repo):
    blocked_repo.blocked.add("5551234567")

    state = workflow.start(make_check(1), CheckAction.PAY)

    assert state.is_blocked_alert_open
    assert not state.is_confirm_dialog_open
    with pytest.raises(InvalidTransitionError):
        workflow.confirm(state)
    assert checks_repo.checks[1].status == CheckStatus.PENDING

    state = workflow.proceed_anyway(state)
    assert not state.is_blocked_alert_open
    assert state.can_confirm

    workflow.confirm(state)
    assert checks_repo.checks[1].status == CheckStatus.COMPLETED


def test_cancel_blocked_alert_closes_it_only(workflow, blocked_repo):
    blocked_repo.blocked.add("5551234567")
    state = workflow.start(make_check(1), CheckAction.PAY)

    state = workflow.cancel(state, Dialog.BLOCKED_ALERT)

    assert not state.is_blocked_alert_open
    assert not state.is_confirm_dialog_open
    assert state.selected_check is not None


def test_reject_always_asks_for_reason(workflow, blocked_repo, calls):
    state = workflow.start(make_check(1), CheckAction.REJECT)

    assert state.is_block_dialog_open
    assert not state.is_confirm_dialog_open
    assert calls == []


@pytest.mark.parametrize("reason", ["", "   "])
def test_reject_needs_non_empty_reason_before_confirm(workflow, reason):
    state = workflow.start(make_check(1), CheckAction.REJECT)

    with pytest.raises(ValidationError):
        workflow.submit_reason(state, reason)
    with pytest.raises(InvalidTransitionError):
        workflow.confirm(state)


def test_reject_fraud_updates_checks_then_blocks(workflow, blocked_repo, calls):
    state = workflow.start(make_check(1), CheckAction.REJECT)
    state = workflow.submit_reason(state, "fraud")
    assert state.is_confirm_dialog_open

    workflow.confirm(state)

    assert calls == [
        ("update", 1, CheckStatus.REJECTED),
        ("check", "5551234567"),
        ("add", "5551234567", "fraud"),
    ]
    assert blocked_repo.records[0].is_blocked is True


def test_reject_already_blocked_skips_block_add(workflow, blocked_repo, calls):
    blocked_repo.blocked.add("5551234567")
    state = workflow.submit_reason(workflow.start(make_check(1), CheckAction.REJECT), "fraud")

    workflow.confirm(state)

    assert ("update", 1, CheckStatus.REJECTED) in calls
    assert not [c for c in calls if c[0] == "add"]


def test_reject_block_failure_leaves_check_rejected(workflow, blocked_repo, checks_repo):
    blocked_repo.fail_add = True
    state = workflow.submit_reason(workflow.start(make_check(1), CheckAction.REJECT), "fraud")

    with pytest.raises(ApiError):
        workflow.confirm(state)

    assert checks_repo.checks[1].status == CheckStatus.REJECTED
    assert blocked_repo.records == []


def test_reject_update_failure_stops_chain(workflow, checks_repo, calls):
    checks_repo.fail_update = True
    state = workflow.submit_reason(workflow.start(make_check(1), CheckAction.REJECT), "fraud")

    with pytest.raises(ApiError):
        workflow.confirm(state)

    assert calls == [("update", 1, CheckStatus.REJECTED)]


def test_non_pending_check_cannot_start(workflow):
    with pytest.raises(InvalidTransitionError):
        workflow.start(make_check(1, status=CheckStatus.COMPLETED), CheckAction.PAY)


def test_state_round_trips_through_session(workflow):
    state = workflow.submit_reason(workflow.start(make_check(1), CheckAction.REJECT), "fraud")

    restored = ActionState.from_session(state.to_session())

    assert restored == state


def test_confirm_checks_current_backend_status(workflow, checks_repo, calls):
    state = workflow.start(make_check(1), CheckAction.PAY)
    checks_repo.checks[1] = checks_repo.checks[1].with_status(CheckStatus.REJECTED)

    with pytest.raises(InvalidTransitionError):
        workflow.confirm(state)
    assert checks_repo.checks[1].status == CheckStatus.REJECTED
    assert not [c for c in calls if c[0] == "update"]


def test_confirm_on_deleted_check_raises_not_found(workflow, checks_repo):
    state = workflow.submit_reason(workflow.start(make_check(1), CheckAction.REJECT), "fraud")
    del checks_repo.checks[1]

    with pytest.raises(NotFoundError):
        workflow.confirm(state)
