from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import MSG_LIST_FAILED, MSG_STORE_CREATE_FAILED
from ..core.exceptions import ApiError, ValidationError
from ..users.session import load_user

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/stores", methods=["GET", "POST"], endpoint="stores")
    def stores():
        user = load_user(session)
        is_adding = request.args.get("add") == "1"
        form = {"store_name": "", "address": ""}
        error = None

        if request.method == "POST":
            is_adding = True
            form = {
                "store_name": request.form.get("store_name", ""),
                "address": request.form.get("address", ""),
            }
            if user is None:
                flash("Please log in to add a store.", "warning")
                return redirect(url_for("login"))
            try:
                container.store_service.create_store(user_id=user.user_id, **form)
                flash("Store created.", "success")
                return redirect(url_for("stores"))
            except ValidationError as e:
                error = str(e)
            except ApiError:
                logger.exception("Error creating store")
                error = MSG_STORE_CREATE_FAILED

        items = []
        if user is not None:
            try:
                items = container.store_service.list_stores(user.user_id)
            except ApiError:
                logger.exception("Error fetching stores")
                flash(MSG_LIST_FAILED, "danger")

        return render_template(
            "stores/index.html",
            stores=items,
            user=user,
            is_adding=is_adding,
            form=form,
            error=error,
            active_page="stores",
        )
