from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """CRM user roles used for payroll visibility."""

    ADMIN = "admin"
    DIRECTOR = "director"
    MANAGER = "manager"
    EMPLOYEE = "employee"

    @property
    def can_manage_payroll(self) -> bool:
        return self in (Role.ADMIN, Role.DIRECTOR)


class DayContext(str, Enum):
    """Which multiplier applies to a worked day."""

    STANDARD = "standard"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


class TaxAggregationPolicy(str, Enum):
    """How monthly income tax is derived from daily records.

    PER_MONTH applies the bracket table once to the summed monthly gross.
    PER_DAY sums the income tax already computed on each day.
    """

    PER_DAY = "per_day"
    PER_MONTH = "per_month"


class HolidayType(str, Enum):
    NATIONAL = "national"
    RELIGIOUS = "religious"
    BANK = "bank"
