from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Iterator

from ..core.constants import MAX_PAYROLL_YEAR, MIN_PAYROLL_YEAR
from ..core.exceptions import InvalidPeriodError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_weekend(day: date) -> bool:
    # Monday=0 ... Saturday=5, Sunday=6
    return day.weekday() >= 5


def validate_period(month: int, year: int) -> None:
    if not 1 <= int(month) <= 12:
        raise InvalidPeriodError(f"Month must be between 1 and 12, got {month}")
    if not MIN_PAYROLL_YEAR <= int(year) <= MAX_PAYROLL_YEAR:
        raise InvalidPeriodError(f"Year must be between {MIN_PAYROLL_YEAR} and {MAX_PAYROLL_YEAR}, got {year}")


def month_bounds(month: int, year: int) -> tuple[date, date]:
    validate_period(month, year)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def iter_month_days(month: int, year: int) -> Iterator[date]:
    start, end = month_bounds(month, year)
    for day in range(start.day, end.day + 1):
        yield date(year, month, day)


def count_working_days(month: int, year: int) -> int:
    """Mon-Fri days of the month. Holidays are not subtracted."""
    return sum(1 for d in iter_month_days(month, year) if not is_weekend(d))
