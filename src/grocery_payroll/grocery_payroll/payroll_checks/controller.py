from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, abort, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import (
    MSG_CHECK_CREATE_FAILED,
    MSG_CHECK_PAY_FAILED,
    MSG_CHECK_REJECT_FAILED,
    MSG_LIST_FAILED,
    SESSION_ACTION_KEY,
)
from ..core.enums import CheckAction, CheckStatus, Dialog
from ..core.exceptions import ApiError, InvalidTransitionError, NotFoundError, ValidationError
from ..employees.model import Employee
from .card import PayrollCard
from .dialogs import open_dialogs
from .workflow import ActionState

logger = logging.getLogger(__name__)

BASE_PATH = "/stores/<int:store_id>/employees/<int:employee_id>/payroll_checks"


def register(app: Flask, container: Container) -> None:
    workflow = container.check_action_workflow

    def _load_state(employee_id: int) -> ActionState:
        data = session.get(SESSION_ACTION_KEY)
        if not data or data.get("employee_id") != employee_id:
            return ActionState()
        return ActionState.from_session(data.get("state"))

    def _save_state(employee_id: int, state: ActionState) -> None:
        session[SESSION_ACTION_KEY] = {"employee_id": employee_id, "state": state.to_session()}

    def _back(store_id: int, employee_id: int):
        return redirect(url_for("payroll_checks", store_id=store_id, employee_id=employee_id))

    def _resolve_employee(store_id: int, employee_id: int) -> Optional[Employee]:
        try:
            return container.employee_service.resolve_selected(store_id=store_id, employee_id=employee_id)
        except NotFoundError:
            logger.warning("Employee %s not found in store %s", employee_id, store_id)
        except ApiError:
            logger.exception("Error fetching employees")
        return None

    @app.route(BASE_PATH, methods=["GET", "POST"], endpoint="payroll_checks")
    def payroll_checks(store_id: int, employee_id: int):
        employee = _resolve_employee(store_id, employee_id)
        is_adding = request.args.get("add") == "1"
        form = {
            "phone_number": employee.mobile_number if employee else "",
            "check_amount": "",
            "transaction_date": "",
            "status": CheckStatus.PENDING.value,
            "location": "",
        }
        error = None

        if request.method == "POST":
            is_adding = True
            form.update({key: request.form.get(key, form[key]) for key in ("check_amount", "transaction_date", "location")})
            if employee is None:
                form["phone_number"] = request.form.get("phone_number", "")
            try:
                container.payroll_check_service.create_check(employee_id=employee_id, **form)
                flash("Payroll check created.", "success")
                return _back(store_id, employee_id)
            except ValidationError as e:
                error = str(e)
            except ApiError:
                logger.exception("Error creating payroll check")
                error = MSG_CHECK_CREATE_FAILED

        checks = []
        try:
            checks = container.payroll_check_service.list_checks(employee_id)
        except ApiError:
            logger.exception("Error fetching payroll checks")
            flash(MSG_LIST_FAILED, "danger")

        state = _load_state(employee_id)
        return render_template(
            "payroll_checks/index.html",
            store_id=store_id,
            employee_id=employee_id,
            employee=employee,
            cards=[PayrollCard.from_check(c) for c in checks],
            is_adding=is_adding,
            form=form,
            error=error,
            state=state,
            dialogs=open_dialogs(state),
            active_page="payroll_checks",
        )

    @app.route(BASE_PATH + "/<int:check_id>/action", methods=["POST"], endpoint="check_action")
    def check_action(store_id: int, employee_id: int, check_id: int):
        try:
            action = CheckAction(request.form.get("action", ""))
        except ValueError:
            abort(400)

        try:
            checks = container.payroll_check_service.list_checks(employee_id)
        except ApiError:
            logger.exception("Error fetching payroll checks")
            flash(MSG_LIST_FAILED, "danger")
            return _back(store_id, employee_id)

        check = next((c for c in checks if c.check_id == check_id), None)
        if check is None:
            flash(f"Payroll check {check_id} not found", "warning")
            return _back(store_id, employee_id)

        try:
            _save_state(employee_id, workflow.start(check, action))
        except InvalidTransitionError as e:
            flash(str(e), "warning")
        return _back(store_id, employee_id)

    @app.route(BASE_PATH + "/reason", methods=["POST"], endpoint="check_reason")
    def check_reason(store_id: int, employee_id: int):
        state = _load_state(employee_id)
        try:
            _save_state(employee_id, workflow.submit_reason(state, request.form.get("reason", "")))
        except (ValidationError, InvalidTransitionError) as e:
            flash(str(e), "danger")
        return _back(store_id, employee_id)

    @app.route(BASE_PATH + "/proceed", methods=["POST"], endpoint="check_proceed")
    def check_proceed(store_id: int, employee_id: int):
        state = _load_state(employee_id)
        try:
            _save_state(employee_id, workflow.proceed_anyway(state))
        except InvalidTransitionError as e:
            flash(str(e), "warning")
        return _back(store_id, employee_id)

    @app.route(BASE_PATH + "/confirm", methods=["POST"], endpoint="check_confirm")
    def check_confirm(store_id: int, employee_id: int):
        state = _load_state(employee_id)
        try:
            _save_state(employee_id, workflow.confirm(state))
            if state.action_type == CheckAction.PAY:
                flash("Check marked as paid.", "success")
            else:
                flash("Check rejected.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except (InvalidTransitionError, NotFoundError) as e:
            flash(str(e), "warning")
            _save_state(employee_id, ActionState())
        except ApiError:
            if state.action_type == CheckAction.PAY:
                logger.exception("Error updating payroll check")
                flash(MSG_CHECK_PAY_FAILED, "danger")
            else:
                logger.exception("Error rejecting payroll check")
                flash(MSG_CHECK_REJECT_FAILED, "danger")
        return _back(store_id, employee_id)

    @app.route(BASE_PATH + "/cancel/<dialog>", methods=["POST"], endpoint="check_cancel")
    def check_cancel(store_id: int, employee_id: int, dialog: str):
        try:
            target = Dialog(dialog)
        except ValueError:
            abort(404)
        _save_state(employee_id, workflow.cancel(_load_state(employee_id), target))
        return _back(store_id, employee_id)
