"""Settings shared by every environment module."""

import os


def db_config_from_env(*, default_password: str = "", default_database: str = "salon_crm") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_database),
    }


# "per_month" applies income-tax brackets to the month's summed gross,
# "per_day" sums the income tax of each day.
TAX_AGGREGATION_POLICY = os.getenv("TAX_AGGREGATION_POLICY", "per_month").lower()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
