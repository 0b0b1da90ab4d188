from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO
from ..core.constants import FALLBACK_HOURLY_RATE, STANDARD_MONTHLY_WORKING_DAYS
from ..core.enums import Role
from ..payroll.model import DEFAULT_RATE_PROFILE, RateProfile


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee with pay configuration.

    Note: Rate columns are nullable in the database; ``None`` means "use the
    default from DEFAULT_RATE_PROFILE".
    """

    employee_id: str
    user_id: Optional[str]
    first_name: str
    last_name: str
    role: Role = Role.EMPLOYEE
    monthly_salary: Optional[Decimal] = None
    hourly_rate: Optional[Decimal] = None
    daily_working_hours: Optional[Decimal] = None
    overtime_rate: Optional[Decimal] = None
    weekend_rate: Optional[Decimal] = None
    holiday_rate: Optional[Decimal] = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def session_user_id(self) -> str:
        """Key used by work sessions and payroll rows."""
        return self.user_id or self.employee_id

    def planned_daily_hours(self) -> Decimal:
        if self.daily_working_hours is None:
            return DEFAULT_RATE_PROFILE.planned_daily_hours
        return self.daily_working_hours

    def resolve_hourly_rate(self) -> Decimal:
        """Explicit hourly rate, else monthly salary spread over 22 days, else 50."""
        if self.hourly_rate is not None and self.hourly_rate > ZERO:
            return self.hourly_rate
        planned = self.planned_daily_hours()
        if self.monthly_salary is not None and self.monthly_salary > ZERO and planned > ZERO:
            return self.monthly_salary / (STANDARD_MONTHLY_WORKING_DAYS * planned)
        return FALLBACK_HOURLY_RATE

    def rate_profile(self) -> RateProfile:
        defaults = DEFAULT_RATE_PROFILE
        return RateProfile(
            hourly_rate=self.resolve_hourly_rate(),
            overtime_rate=self.overtime_rate if self.overtime_rate is not None else defaults.overtime_rate,
            weekend_rate=self.weekend_rate if self.weekend_rate is not None else defaults.weekend_rate,
            holiday_rate=self.holiday_rate if self.holiday_rate is not None else defaults.holiday_rate,
            planned_daily_hours=self.planned_daily_hours(),
        )
