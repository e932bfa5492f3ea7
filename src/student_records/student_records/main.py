from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_REPORT_INTERVAL_SECONDS
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .reports.scheduler import start_report_scheduler
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": "internal server error"}), 500


def create_app(container: Optional[Container] = None, *, start_scheduler: Optional[bool] = None) -> Flask:
    """Build the Flask app.

    Passing a ready `container` skips all database setup (used by tests).
    """
    # Best-effort: a missing .env is fine
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            config = DBConfig.from_dict(db_config)
            apply_schema(config)
            logger.info("schema ready (tables=%d)", len(list_tables(config)))

        container = build_container(db_config=db_config)

    register_students(app, container)
    register_attendance(app, container)
    register_error_handlers(app)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    if start_scheduler is None:
        start_scheduler = bool(getattr(settings, "REPORT_ENABLED", False)) and not app.config["TESTING"]
    if start_scheduler:
        interval = int(getattr(settings, "REPORT_INTERVAL_SECONDS", DEFAULT_REPORT_INTERVAL_SECONDS))
        app.extensions["report_scheduler"] = start_report_scheduler(container.weekly_report_job, interval_seconds=interval)

    app.extensions["container"] = container
    return app
