from __future__ import annotations

import atexit
import importlib
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .appointments.controller import register as register_appointments
from .catalog.controller import register as register_catalog
from .cases.controller import register as register_cases
from .clients.controller import register as register_clients
from .common.web import LedgerJSONProvider, register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_default_admin, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = LedgerJSONProvider(app)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

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
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_default_admin(db_config)
            logger.info("demo seed ready")

        permissions_file = getattr(settings, "PERMISSIONS_FILE", REPO_ROOT / "config" / "permissions.json")
        container = build_container(db_config=db_config, permissions_file=permissions_file)
        atexit.register(container.close)

    app.extensions["law_office"] = container
    register_error_handlers(app)

    register_users(app, container)
    register_employees(app, container)
    register_cases(app, container)
    register_payroll(app, container)
    register_clients(app, container)
    register_catalog(app, container)
    register_appointments(app, container)

    return app


def main() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))


if __name__ == "__main__":
    main()
