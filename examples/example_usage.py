"""Example: payroll arithmetic without Flask or a database.

Controllers stay thin; the calculator is a pure function of its inputs.
"""

from datetime import date
from decimal import Decimal

from src.salon_crm.salon_crm.common.money import format_try
from src.salon_crm.salon_crm.payroll.calculator.turkish_calculator import compute_daily_pay, compute_monthly_pay
from src.salon_crm.salon_crm.payroll.model import DailyWorkRecord, RateProfile


def main():
    profile = RateProfile(hourly_rate=Decimal("100"))
    days = [
        DailyWorkRecord(work_date=date(2025, 3, 3), planned_hours=Decimal("8"), actual_hours=Decimal("8")),
        DailyWorkRecord(work_date=date(2025, 3, 4), planned_hours=Decimal("8"), actual_hours=Decimal("10")),
        DailyWorkRecord(work_date=date(2025, 3, 8), planned_hours=Decimal("8"), actual_hours=Decimal("6")),
    ]
    daily = [compute_daily_pay(profile, d) for d in days]
    for d in daily:
        print(d.work_date, d.day_context.value, format_try(d.gross_pay), format_try(d.net_pay))

    monthly = compute_monthly_pay(profile, daily, 3, 2025)
    print("gross", format_try(monthly.gross_salary), "net", format_try(monthly.net_salary))


if __name__ == "__main__":
    main()
