from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_DATA_FILE, DEFAULT_PORT
from .core.exceptions import NotFoundError, StorageError
from .core.logging_config import setup_logging
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def _load_settings(app: Flask) -> str:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_FILE"] = getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)
    app.config["HOST"] = getattr(settings, "HOST", "127.0.0.1")
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    app.config["LOG_FILE"] = getattr(settings, "LOG_FILE", None)
    return settings_module


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        logger.warning("%s", e)
        return render_template("404.html", message=str(e)), 404

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.exception("Storage failure: %s", e)
        return render_template("500.html"), 500


def create_app(overrides: Optional[Mapping[str, Any]] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = _load_settings(app)
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_FILE"])
    logger.debug("settings=%s data_file=%s", settings_module, app.config["DATA_FILE"])

    if container is None:
        container = build_container(data_file=app.config["DATA_FILE"])
    app.extensions["payroll_container"] = container

    _register_error_handlers(app)
    register_employees(app, container)
    register_payroll(app, container)

    return app


def serve() -> int:
    """Run the development server until interrupted; returns the exit status."""
    app = create_app()
    host = app.config["HOST"]
    port = int(app.config["PORT"])

    employees = app.extensions["payroll_container"].employees_repo.read_all()
    logger.info("Payroll System -> http://%s:%d", host, port)
    logger.info("%d employee(s) loaded", len(employees))

    try:
        app.run(host=host, port=port, debug=app.config["DEBUG"], use_reloader=False)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    logger.info("Shutting down")
    return 0
