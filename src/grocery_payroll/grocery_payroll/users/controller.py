from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError
from .model import User
from .session import clear_user, load_user, save_user


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.context_processor
    def inject_current_user():
        return {"current_user": load_user(session)}

    @app.route("/", endpoint="home")
    def home():
        return render_template("home.html", is_authenticated=load_user(session) is not None)

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "POST":
            try:
                raw_id = require_non_empty(request.form.get("user_id", ""), "User ID")
                try:
                    user_id = int(raw_id)
                except ValueError:
                    raise ValidationError("User ID must be a number")

                user = User(
                    user_id=user_id,
                    full_name=(request.form.get("full_name") or "").strip(),
                    username=(request.form.get("username") or "").strip(),
                    email=(request.form.get("email") or "").strip(),
                )
                save_user(session, user)
                flash("Logged in.", "success")
                return redirect(url_for("stores"))
            except ValidationError as e:
                flash(str(e), "danger")

        return render_template("login.html")

    @app.route("/register", endpoint="register")
    def register_page():
        return render_template("register.html")

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        clear_user(session)
        container.employee_context.clear()
        flash("Logged out.", "info")
        return redirect(url_for("login"))
