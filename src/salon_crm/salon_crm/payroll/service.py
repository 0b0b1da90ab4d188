from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.money import format_try
from ..core.enums import Role, TaxAggregationPolicy
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..holidays.holiday_calendar import HolidayCalendar
from ..work_sessions.repository import WorkSessionRepository
from ..work_sessions.service import hours_by_date
from .calculator.base import PayrollCalculator
from .calculator.turkish_calculator import TurkishPayrollCalculator
from .model import DailyPayRecord, DailyWorkRecord, MonthlyPayRecord
from .repository import EmployeeMonthlyPay, PayrollRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeDailyPay:
    employee_id: str
    employee_name: str
    record: DailyPayRecord


@dataclass(frozen=True)
class SyncFailure:
    employee_id: str
    employee_name: str
    reason: str


@dataclass
class SyncReport:
    month: int
    year: int
    synced: list[EmployeeMonthlyPay] = field(default_factory=list)
    failed: list[SyncFailure] = field(default_factory=list)


class PayrollService:
    """Use case: turn tracked work sessions into stored payroll rows.

    Pure arithmetic is delegated to the calculator; this class only gathers
    inputs (rates, hours, holidays), enforces who may see what, and persists.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        sessions: WorkSessionRepository,
        holidays: HolidayCalendar,
        payroll: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        tax_policy: TaxAggregationPolicy = TaxAggregationPolicy.PER_MONTH,
    ):
        self._employees = employees
        self._sessions = sessions
        self._holidays = holidays
        self._payroll = payroll
        self._calculator = calculator or TurkishPayrollCalculator()
        self._tax_policy = tax_policy

    @property
    def tax_policy(self) -> TaxAggregationPolicy:
        return self._tax_policy

    # ------------------------------------------------------------------ inputs

    def build_work_records(self, employee: Employee, start: date, end: date) -> list[DailyWorkRecord]:
        """One record per date with closed sessions in [start, end]."""
        if end < start:
            raise ValidationError("End date is before start date")

        sessions = self._sessions.list_closed_between(
            user_id=employee.session_user_id, start_date=start, end_date=end
        )
        hours = hours_by_date(sessions)
        if not hours:
            return []

        holidays = self._holidays.holiday_dates_between(start, end)
        planned = employee.planned_daily_hours()
        return [
            DailyWorkRecord(
                work_date=d,
                planned_hours=planned,
                actual_hours=hours[d],
                is_holiday=d in holidays,
            )
            for d in sorted(hours)
        ]

    def compute_daily_records(self, employee: Employee, start: date, end: date) -> list[DailyPayRecord]:
        profile = employee.rate_profile()
        return [
            self._calculator.compute_daily_pay(profile, r)
            for r in self.build_work_records(employee, start, end)
        ]

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _monthly(self, employee: Employee, daily: Sequence[DailyPayRecord], month: int, year: int) -> MonthlyPayRecord:
        return self._calculator.compute_monthly_pay(
            employee.rate_profile(), daily, month, year, policy=self._tax_policy
        )

    # --------------------------------------------------------------- triggers

    def recalculate_day(self, user_id: str, work_date: date) -> Optional[DailyPayRecord]:
        """Called when a work session closes: refresh that day and its month."""
        employee = self._employees.get_by_user_id(user_id)
        if not employee:
            logger.info("No employee linked to user %s; skipping payroll", user_id)
            return None
        return self._recalculate_employee_day(employee, work_date)

    def _recalculate_employee_day(self, employee: Employee, work_date: date) -> Optional[DailyPayRecord]:
        records = self.compute_daily_records(employee, work_date, work_date)
        if not records:
            return None
        return self._store_day(employee, records[0])

    def _stored_month(self, employee: Employee, month: int, year: int) -> dict[date, DailyPayRecord]:
        start, end = month_bounds(month, year)
        return {
            r.work_date: r
            for r in self._payroll.list_daily_between(employee_id=employee.employee_id, start_date=start, end_date=end)
        }

    def _store_day(self, employee: Employee, day: DailyPayRecord) -> DailyPayRecord:
        """Upsert one day and recompute its month from the stored days."""
        month, year = day.work_date.month, day.work_date.year
        stored = self._stored_month(employee, month, year)
        stored[day.work_date] = day
        monthly = self._monthly(employee, list(stored.values()), month, year)

        self._payroll.save_month(employee_id=employee.employee_id, daily=[day], monthly=monthly)
        logger.info(
            "Recalculated payroll for %s on %s: %sh, %s net",
            employee.full_name, day.work_date, f"{day.actual_hours:.2f}", format_try(day.net_pay),
        )
        return day

    def record_manual_day(
        self,
        *,
        current_role: Role,
        employee_id: str,
        work_date: date,
        actual_hours: Decimal,
        planned_hours: Optional[Decimal] = None,
    ) -> DailyPayRecord:
        """Admin entry of a day's hours without work sessions. Pay is still computed here."""
        if not current_role.can_manage_payroll:
            raise AuthorizationError("Only admins and directors can create daily payroll")
        employee = self._require_employee(employee_id)

        record = DailyWorkRecord(
            work_date=work_date,
            planned_hours=employee.planned_daily_hours() if planned_hours is None else planned_hours,
            actual_hours=actual_hours,
            is_holiday=self._holidays.is_holiday(work_date),
        )
        day = self._calculator.compute_daily_pay(employee.rate_profile(), record)
        return self._store_day(employee, day)

    def delete_day(self, *, current_role: Role, employee_id: str, work_date: date) -> None:
        if not current_role.can_manage_payroll:
            raise AuthorizationError("Only admins and directors can delete daily payroll")
        employee = self._require_employee(employee_id)

        stored = self._stored_month(employee, work_date.month, work_date.year)
        if stored.pop(work_date, None) is None:
            raise NotFoundError(f"No daily payroll for {employee.full_name} on {work_date}")
        monthly = self._monthly(employee, list(stored.values()), work_date.month, work_date.year)

        if not self._payroll.delete_day(employee_id=employee.employee_id, work_date=work_date, monthly=monthly):
            raise NotFoundError(f"No daily payroll for {employee.full_name} on {work_date}")
        logger.info("Deleted daily payroll for %s on %s", employee.full_name, work_date)

    def sync_month(self, employee_id: str, month: int, year: int) -> MonthlyPayRecord:
        """Recompute every worked day of the month from sessions and overwrite it."""
        employee = self._require_employee(employee_id)
        return self._sync_employee(employee, month, year)

    def _sync_employee(self, employee: Employee, month: int, year: int) -> MonthlyPayRecord:
        start, end = month_bounds(month, year)
        daily = self.compute_daily_records(employee, start, end)
        monthly = self._monthly(employee, daily, month, year)
        self._payroll.save_month(employee_id=employee.employee_id, daily=daily, monthly=monthly, replace=True)
        return monthly

    def sync_all(self, *, current_role: Role, month: int, year: int) -> SyncReport:
        if not current_role.can_manage_payroll:
            raise AuthorizationError("Only admins and directors can sync payroll")
        month_bounds(month, year)

        report = SyncReport(month=month, year=year)
        for employee in self._employees.list_active():
            try:
                monthly = self._sync_employee(employee, month, year)
            except ValidationError as exc:
                logger.warning("Payroll sync skipped %s (%s): %s", employee.full_name, employee.employee_id, exc)
                report.failed.append(
                    SyncFailure(employee_id=employee.employee_id, employee_name=employee.full_name, reason=str(exc))
                )
                continue
            report.synced.append(
                EmployeeMonthlyPay(employee_id=employee.employee_id, employee_name=employee.full_name, record=monthly)
            )

        logger.info(
            "Payroll sync %d-%02d: %d synced, %d failed", year, month, len(report.synced), len(report.failed)
        )
        return report

    def recalculate_employee_day(self, *, current_role: Role, employee_id: str, work_date: date) -> Optional[DailyPayRecord]:
        if not current_role.can_manage_payroll:
            raise AuthorizationError("Only admins and directors can recalculate payroll")
        employee = self._require_employee(employee_id)
        return self._recalculate_employee_day(employee, work_date)

    # ------------------------------------------------------------------ reads

    def _visible_employees(self, *, current_role: Role, user_id: str, employee_id: Optional[str]) -> list[Employee]:
        if current_role.can_manage_payroll:
            if employee_id:
                return [self._require_employee(employee_id)]
            return list(self._employees.list_active())

        own = self._employees.get_by_user_id(user_id)
        if not own:
            return []
        if employee_id and employee_id != own.employee_id:
            raise AuthorizationError("You can only view your own payroll")
        return [own]

    def list_monthly(self, *, current_role: Role, user_id: str, month: int, year: int) -> Sequence[EmployeeMonthlyPay]:
        month_bounds(month, year)
        if current_role.can_manage_payroll:
            return self._payroll.list_monthly(month=month, year=year)

        own = self._employees.get_by_user_id(user_id)
        if not own:
            return []
        return self._payroll.list_monthly(month=month, year=year, employee_id=own.employee_id)

    def calculate_daily(
        self,
        *,
        current_role: Role,
        user_id: str,
        start: date,
        end: date,
        employee_id: Optional[str] = None,
    ) -> list[EmployeeDailyPay]:
        """On-the-fly daily pay from sessions, sorted by employee then date."""
        out: list[EmployeeDailyPay] = []
        for employee in self._visible_employees(current_role=current_role, user_id=user_id, employee_id=employee_id):
            for record in self.compute_daily_records(employee, start, end):
                out.append(
                    EmployeeDailyPay(employee_id=employee.employee_id, employee_name=employee.full_name, record=record)
                )
        out.sort(key=lambda x: (x.employee_name, x.record.work_date))
        return out

    def monthly_totals(self, rows: Sequence[EmployeeMonthlyPay]) -> dict[str, Decimal]:
        """Dashboard totals over a list of monthly rows."""
        keys = ("gross_salary", "total_deductions", "net_salary", "total_employer_cost")
        return {k: sum((getattr(r.record, k) for r in rows), Decimal("0")) for k in keys}
