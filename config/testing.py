import os

from .config import TAX_AGGREGATION_POLICY, db_config_from_env  # noqa: F401

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_database="salon_crm_test")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
