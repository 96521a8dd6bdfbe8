from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import format_display_date
from .container import Container, build_container
from .logging_config import configure_logging
from .employees.controller import register as register_employees
from .payroll_checks.controller import register as register_payroll_checks
from .stores.controller import register as register_stores
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    api_config = getattr(settings, "API_CONFIG")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s backend=%s", settings_module, api_config.get("base_url"))

    if container is None:
        container = build_container(api_config=api_config)

    app.jinja_env.filters["display_date"] = format_display_date

    register_users(app, container)
    register_stores(app, container)
    register_employees(app, container)
    register_payroll_checks(app, container)

    return app
