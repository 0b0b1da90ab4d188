from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyPayRecord, MonthlyPayRecord


@dataclass(frozen=True)
class EmployeeMonthlyPay:
    """Read-model: a stored monthly row with its employee."""

    employee_id: str
    employee_name: str
    record: MonthlyPayRecord


class PayrollRepository(Protocol):
    def list_daily_between(self, *, employee_id: str, start_date: date, end_date: date) -> Sequence[DailyPayRecord]:
        raise NotImplementedError

    def save_month(
        self,
        *,
        employee_id: str,
        daily: Sequence[DailyPayRecord],
        monthly: MonthlyPayRecord,
        replace: bool = False,
    ) -> None:
        """Upsert ``daily`` rows and the monthly row in one transaction.

        With ``replace`` the month's other daily rows are removed first, so the
        stored month equals exactly ``daily``.
        """

        raise NotImplementedError

    def get_monthly(self, *, employee_id: str, month: int, year: int) -> Optional[MonthlyPayRecord]:
        raise NotImplementedError

    def list_monthly(self, *, month: int, year: int, employee_id: Optional[str] = None) -> Sequence[EmployeeMonthlyPay]:
        raise NotImplementedError

    def delete_day(self, *, employee_id: str, work_date: date, monthly: MonthlyPayRecord) -> bool:
        """Remove one daily row and store the recomputed month in the same transaction."""

        raise NotImplementedError
