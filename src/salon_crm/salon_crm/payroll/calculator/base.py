from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...core.enums import TaxAggregationPolicy
from ..model import DailyPayRecord, DailyWorkRecord, MonthlyPayRecord, RateProfile


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_daily_pay(self, profile: RateProfile, record: DailyWorkRecord) -> DailyPayRecord:
        raise NotImplementedError

    @abstractmethod
    def compute_monthly_pay(
        self,
        profile: RateProfile,
        daily_records: Iterable[DailyPayRecord],
        month: int,
        year: int,
        *,
        policy: TaxAggregationPolicy = TaxAggregationPolicy.PER_MONTH,
    ) -> MonthlyPayRecord:
        raise NotImplementedError
