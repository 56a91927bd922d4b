from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .common.logging_setup import configure_logging
from .config import get_settings_module
from .config.settings import EngineSettings
from .container import Container, build_container
from .core.exceptions import (
    AlreadyCompletedError,
    AlreadyExistsError,
    DomainError,
    InvalidTransitionError,
    NoEligibleEmployeesError,
    NotFoundError,
    ValidationError,
)
from .database.bootstrap import apply_schema
from .payroll.controller import register as register_payroll
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (AlreadyExistsError, 409),
    (AlreadyCompletedError, 409),
    (InvalidTransitionError, 409),
    (NoEligibleEmployeesError, 422),
)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        for error_type, status in _STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                break
        else:
            status = 400
        return jsonify({"error": type(exc).__name__, "message": str(exc)}), status


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))
    engine_settings = EngineSettings.from_module(settings)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
        container = build_container(db_config=db_config, settings=engine_settings)

    app.extensions["clinic_timepay"] = container

    _register_error_handlers(app)
    register_attendance(app, container)
    register_schedules(app, container)
    register_payroll(app, container)

    return app
