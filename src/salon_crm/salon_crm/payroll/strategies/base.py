from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...common.money import ZERO
from ...core.enums import DayContext
from ..model import DailyWorkRecord, RateProfile


@dataclass(frozen=True)
class GrossBreakdown:
    base_pay: Decimal
    overtime_pay: Decimal
    overtime_hours: Decimal

    @property
    def gross_pay(self) -> Decimal:
        return self.base_pay + self.overtime_pay


def overtime_hours(record: DailyWorkRecord) -> Decimal:
    return max(ZERO, record.actual_hours - record.planned_hours)


class PayStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's hours turn into gross pay."""

    context: DayContext

    @abstractmethod
    def gross(self, *, profile: RateProfile, record: DailyWorkRecord) -> GrossBreakdown:
        raise NotImplementedError
