from __future__ import annotations

from dataclasses import dataclass

from .model import DailyWorkRecord
from .strategies.base import PayStrategy
from .strategies.flat_rate_strategy import HolidayStrategy, WeekendStrategy
from .strategies.standard_strategy import StandardStrategy


@dataclass
class PayStrategyFactory:
    """Factory Pattern: holiday beats weekend beats standard."""

    def for_day(self, record: DailyWorkRecord) -> PayStrategy:
        if record.is_holiday:
            return HolidayStrategy()
        if record.is_weekend:
            return WeekendStrategy()
        return StandardStrategy()
