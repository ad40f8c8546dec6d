from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .checkins.controller import register as register_checkins
from .company.controller import register as register_company
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .ledgers.controller import register as register_ledgers
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app; pass a container to run on other repositories."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        db = DBConfig.from_dict(db_config)
        logger.info("settings=%s db=%s", settings_module, db.describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db)
            logger.info("schema ready (tables=%d)", len(list_tables(db)))

        container = build_container(db_config=db_config, settings=settings)

    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_ledgers(app, container)
    register_payroll(app, container)
    register_company(app, container)
    register_checkins(app, container)

    return app
