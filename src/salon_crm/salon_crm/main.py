from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.enums import TaxAggregationPolicy
from .database.bootstrap import apply_schema, list_tables
from .holidays.controller import register as register_holidays
from .payroll.controller import register as register_payroll
from .work_sessions.controller import register as register_work_sessions

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    tax_policy = TaxAggregationPolicy(getattr(settings, "TAX_AGGREGATION_POLICY", TaxAggregationPolicy.PER_MONTH.value))
    container = build_container(db_config=db_config, tax_policy=tax_policy)
    logger.info("settings=%s db=%s tax_policy=%s", settings_module, container.conn.config.describe(), tax_policy.value)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(container.conn, schema_path=schema_path)
        logger.debug("schema ready (tables=%d)", len(list_tables(container.conn)))

    register_work_sessions(app, container)
    register_payroll(app, container)
    register_holidays(app, container)

    return app
