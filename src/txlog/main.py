from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import get_settings_module
from .container import Container, build_container
from .core.constants import (
    DEFAULT_POOL_SIZE,
    DEFAULT_POOL_TIMEOUT,
    DEFAULT_SESSION_HOURS,
    GENERIC_ERROR_MESSAGE,
)
from .database.bootstrap import ensure_schema, list_tables
from .admins.controller import register as register_admins
from .borrows.controller import register as register_borrows
from .repairs.controller import register as register_repairs
from .reports.controller import register as register_reports
from .reservations.controller import register as register_reservations
from .tech4ed.controller import register as register_tech4ed

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app. Pass ``container`` to run against other repositories (tests)."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    # handlers are the entry point's job; settings only pick the package level
    logging.getLogger(__package__).setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(
        hours=int(getattr(settings, "SESSION_HOURS", DEFAULT_SESSION_HOURS))
    )
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
            pool_timeout=float(getattr(settings, "DB_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT)),
        )

    register_admins(app, container)
    register_repairs(app, container)
    register_borrows(app, container)
    register_reservations(app, container)
    register_tech4ed(app, container)
    register_reports(app, container)

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return jsonify({"success": False, "message": e.description}), e.code
        logger.exception("Unhandled error: %s", e)
        return jsonify({"success": False, "message": GENERIC_ERROR_MESSAGE}), 500

    return app
