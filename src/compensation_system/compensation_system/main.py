from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.controller import register as register_api
from .container import build_container


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    compensation = dict(getattr(settings, "COMPENSATION", {}))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    if app.config["DEBUG"]:
        app.logger.info(
            "[compensation-system] settings=%s base_pay=%s cap=%s",
            settings_module,
            compensation.get("base_pay"),
            compensation.get("regular_hours_cap"),
        )

    container = build_container(compensation=compensation)
    app.extensions["compensation_container"] = container

    register_api(app, container)

    return app
