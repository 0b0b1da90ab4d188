"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Hourly rate derivation for salaried employees: monthly / (days * daily hours)
STANDARD_MONTHLY_WORKING_DAYS = 22
FALLBACK_HOURLY_RATE = Decimal("50")

MAX_DAILY_HOURS = Decimal("24")

MIN_PAYROLL_YEAR = 2000
MAX_PAYROLL_YEAR = 2100

MONEY_PLACES = Decimal("0.01")
