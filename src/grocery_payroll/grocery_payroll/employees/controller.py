from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import MSG_EMPLOYEE_CREATE_FAILED, MSG_LIST_FAILED
from ..core.exceptions import ApiError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/stores/<int:store_id>/employees", methods=["GET", "POST"], endpoint="employees")
    def employees(store_id: int):
        is_adding = request.args.get("add") == "1"
        form = {"full_name": "", "employee_code": "", "mobile_number": ""}
        error = None

        if request.method == "POST":
            is_adding = True
            form = {key: request.form.get(key, "") for key in form}
            try:
                container.employee_service.create_employee(store_id=store_id, **form)
                flash("Employee created.", "success")
                return redirect(url_for("employees", store_id=store_id))
            except ValidationError as e:
                error = str(e)
            except ApiError:
                logger.exception("Error creating employee")
                error = MSG_EMPLOYEE_CREATE_FAILED

        items = []
        try:
            items = container.employee_service.list_employees(store_id)
        except ApiError:
            logger.exception("Error fetching employees")
            flash(MSG_LIST_FAILED, "danger")

        return render_template(
            "employees/index.html",
            store_id=store_id,
            employees=items,
            is_adding=is_adding,
            form=form,
            error=error,
            active_page="employees",
        )

    @app.route(
        "/stores/<int:store_id>/employees/<int:employee_id>/select",
        methods=["POST"],
        endpoint="select_employee",
    )
    def select_employee(store_id: int, employee_id: int):
        try:
            container.employee_service.select_employee(store_id=store_id, employee_id=employee_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("employees", store_id=store_id))
        except ApiError:
            logger.exception("Error fetching employees")
            flash(MSG_LIST_FAILED, "danger")
            return redirect(url_for("employees", store_id=store_id))

        return redirect(url_for("payroll_checks", store_id=store_id, employee_id=employee_id))
