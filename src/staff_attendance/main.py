from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_MAX_SESSIONS, DEFAULT_MESSAGE_TIMEOUT_MS
from .database.bootstrap import apply_schema, list_tables
from .reports.controller import register as register_reports
from .settings import get_settings_module
from .staff.controller import register as register_staff

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MESSAGE_TIMEOUT_MS"] = int(getattr(settings, "MESSAGE_TIMEOUT_MS", DEFAULT_MESSAGE_TIMEOUT_MS))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        container = build_container(
            db_config=db_config,
            max_sessions=int(getattr(settings, "MAX_SESSIONS", DEFAULT_MAX_SESSIONS)),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    register_staff(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
