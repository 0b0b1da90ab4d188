from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import month_bounds
from .model import Holiday
from .repository import HolidayRepository


class HolidayCalendar:
    """Answers "is this date a holiday?" for payroll."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def is_holiday(self, day: date) -> bool:
        return bool(self._holidays.list_between(start_date=day, end_date=day))

    def holiday_dates_between(self, start: date, end: date) -> set[date]:
        return {h.holiday_date for h in self._holidays.list_between(start_date=start, end_date=end)}

    def holidays_in_month(self, month: int, year: int) -> Sequence[Holiday]:
        start, end = month_bounds(month, year)
        return self._holidays.list_between(start_date=start, end_date=end)
