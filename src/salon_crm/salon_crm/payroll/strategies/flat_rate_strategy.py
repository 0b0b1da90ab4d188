from __future__ import annotations

from decimal import Decimal

from ...common.money import ZERO
from ...core.enums import DayContext
from ..model import DailyWorkRecord, RateProfile
from .base import GrossBreakdown, PayStrategy, overtime_hours


class FlatRateStrategy(PayStrategy):
    """Every actual hour at one multiplier, no overtime premium.

    Overtime hours are still reported. A 12 hour holiday pays 12 hours at
    holiday_rate and nothing more.
    """

    def _multiplier(self, profile: RateProfile) -> Decimal:
        raise NotImplementedError

    def gross(self, *, profile: RateProfile, record: DailyWorkRecord) -> GrossBreakdown:
        return GrossBreakdown(
            base_pay=record.actual_hours * profile.hourly_rate * self._multiplier(profile),
            overtime_pay=ZERO,
            overtime_hours=overtime_hours(record),
        )


class WeekendStrategy(FlatRateStrategy):
    context = DayContext.WEEKEND

    def _multiplier(self, profile: RateProfile) -> Decimal:
        return profile.weekend_rate


class HolidayStrategy(FlatRateStrategy):
    context = DayContext.HOLIDAY

    def _multiplier(self, profile: RateProfile) -> Decimal:
        return profile.holiday_rate
