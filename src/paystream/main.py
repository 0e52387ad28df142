from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request

from .config import get_settings_module
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

from .common.http import register_error_handlers
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .ledger.controller import register as register_ledger
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings

log = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[2] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        log.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            log.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            log.info("Sample roster loaded")

        container = build_container(db_config=db_config, settings=settings)

    app.extensions["paystream"] = container

    @app.before_request
    def _load_workspace():
        if request.path.startswith("/api/"):
            container.workspace.ensure_loaded()

    register_error_handlers(app)
    register_employees(app, container)
    register_payroll(app, container)
    register_ledger(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_reports(app, container)

    return app
