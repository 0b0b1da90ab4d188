from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    """Domain entity: an official Turkish holiday (no work expected)."""

    holiday_date: date
    name: str
    holiday_type: HolidayType = HolidayType.NATIONAL
