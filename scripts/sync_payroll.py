"""Recompute and store monthly payroll for every active employee.

Usage: python scripts/sync_payroll.py 2025 3
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.salon_crm.salon_crm.common.money import format_try
from src.salon_crm.salon_crm.container import build_container
from src.salon_crm.salon_crm.core.enums import Role, TaxAggregationPolicy


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("year", type=int)
    parser.add_argument("month", type=int)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(
        db_config=settings.DB_CONFIG,
        tax_policy=TaxAggregationPolicy(settings.TAX_AGGREGATION_POLICY),
    )

    report = container.payroll_service.sync_all(current_role=Role.ADMIN, month=args.month, year=args.year)
    for row in report.synced:
        print(f"{row.employee_name:<30} gross={format_try(row.record.gross_salary):>15} net={format_try(row.record.net_salary):>15}")
    for failure in report.failed:
        print(f"FAILED {failure.employee_name}: {failure.reason}")

    if report.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
