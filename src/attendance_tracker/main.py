from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_utils import setup_logger
from .container import Container, build_container
from .core.exceptions import FormatError, NotFoundError, PersistenceError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .persistence.controller import register as register_persistence
from .projection.controller import register as register_projection
from .projection.model import ProjectionConfig
from .statistics.controller import register as register_statistics
from .subjects.controller import register as register_subjects
from .timetable.controller import register as register_timetable

logger = logging.getLogger(__name__)


def _projection_config(settings: ModuleType) -> ProjectionConfig:
    defaults = ProjectionConfig()
    return ProjectionConfig(
        month_school_days=int(getattr(settings, "PROJECTION_MONTH_SCHOOL_DAYS", defaults.month_school_days)),
        school_days_per_week=int(getattr(settings, "PROJECTION_SCHOOL_DAYS_PER_WEEK", defaults.school_days_per_week)),
        targets=tuple(getattr(settings, "PROJECTION_TARGETS", defaults.targets)),
    )


def container_from_settings(settings: ModuleType) -> Container:
    storage_backend = getattr(settings, "STORAGE_BACKEND", "file")
    db_config = dict(getattr(settings, "DB_CONFIG", {}))

    return build_container(
        storage_backend=storage_backend,
        data_dir=getattr(settings, "DATA_DIR", "data"),
        storage_key=getattr(settings, "STORAGE_KEY", "student-app-storage"),
        db_config=db_config,
        projection=_projection_config(settings),
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    @app.errorhandler(FormatError)
    def handle_bad_request(e):
        return jsonify(error=str(e)), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return jsonify(error=str(e)), 404

    @app.errorhandler(PersistenceError)
    def handle_persistence(e):
        # The in-memory change stays applied; the client must know it was not saved.
        logger.error("Persistence failure: %s", e)
        return jsonify(error=str(e)), 500


def create_app(settings: Optional[ModuleType] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY", "dev-secret-key")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logger(
        "attendance_tracker",
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_file=getattr(settings, "LOG_FILE", None),
    )

    if container is None:
        if getattr(settings, "STORAGE_BACKEND", "file") == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
            conn = DatabaseConnection(DBConfig.from_dict(dict(getattr(settings, "DB_CONFIG", {}))))
            apply_schema(conn)
            logger.info("Schema ready (tables=%d)", len(list_tables(conn)))
        container = container_from_settings(settings)

    app.extensions["attendance_tracker"] = container

    register_error_handlers(app)
    register_subjects(app, container)
    register_timetable(app, container)
    register_attendance(app, container)
    register_statistics(app, container)
    register_projection(app, container)
    register_persistence(app, container)

    return app
