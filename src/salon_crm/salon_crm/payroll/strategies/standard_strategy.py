from __future__ import annotations

from ...core.enums import DayContext
from ..model import DailyWorkRecord, RateProfile
from .base import GrossBreakdown, PayStrategy, overtime_hours


class StandardStrategy(PayStrategy):
    """Weekday: planned hours at the base rate, the rest at overtime_rate."""

    context = DayContext.STANDARD

    def gross(self, *, profile: RateProfile, record: DailyWorkRecord) -> GrossBreakdown:
        regular = min(record.actual_hours, record.planned_hours)
        extra = overtime_hours(record)
        return GrossBreakdown(
            base_pay=regular * profile.hourly_rate,
            overtime_pay=extra * profile.hourly_rate * profile.overtime_rate,
            overtime_hours=extra,
        )
