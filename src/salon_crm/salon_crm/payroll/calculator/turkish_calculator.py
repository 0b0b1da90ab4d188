from __future__ import annotations

from dataclasses import asdict
from decimal import Decimal
from typing import Iterable, Optional

from ...common.datetime_utils import count_working_days, validate_period
from ...common.money import ZERO, quantize_money
from ...core.constants import MAX_DAILY_HOURS
from ...core.enums import TaxAggregationPolicy
from ...core.exceptions import InvalidHoursError, InvalidPeriodError, InvalidRateError
from ..factory import PayStrategyFactory
from ..model import DailyPayRecord, DailyWorkRecord, MonthlyPayRecord, RateProfile, StatutoryDeductions
from ..tax import compute_deductions
from .base import PayrollCalculator


def validate_rate_profile(profile: RateProfile) -> None:
    if profile.hourly_rate < ZERO:
        raise InvalidRateError(f"Hourly rate cannot be negative: {profile.hourly_rate}")
    for name in ("overtime_rate", "weekend_rate", "holiday_rate"):
        value = getattr(profile, name)
        if value < 1:
            raise InvalidRateError(f"{name} must be at least 1, got {value}")
    if not ZERO < profile.planned_daily_hours <= MAX_DAILY_HOURS:
        raise InvalidRateError(f"Planned daily hours must be in (0, 24], got {profile.planned_daily_hours}")


def rounded_deductions(gross: Decimal) -> StatutoryDeductions:
    """Statutory deductions with each item rounded to kuruş."""
    exact = compute_deductions(gross)
    return StatutoryDeductions(**{k: quantize_money(v) for k, v in asdict(exact).items()})


def validate_work_record(record: DailyWorkRecord) -> None:
    if record.actual_hours < ZERO:
        raise InvalidHoursError(f"Actual hours cannot be negative ({record.work_date}: {record.actual_hours})")
    if record.planned_hours < ZERO:
        raise InvalidHoursError(f"Planned hours cannot be negative ({record.work_date}: {record.planned_hours})")


class TurkishPayrollCalculator(PayrollCalculator):
    """Turkish labor-law rule: multiplier per day context, statutory
    deductions on gross, monthly totals as sums of the days."""

    def __init__(self, *, strategy_factory: Optional[PayStrategyFactory] = None):
        self._factory = strategy_factory or PayStrategyFactory()

    def compute_daily_pay(self, profile: RateProfile, record: DailyWorkRecord) -> DailyPayRecord:
        validate_rate_profile(profile)
        validate_work_record(record)

        strategy = self._factory.for_day(record)
        breakdown = strategy.gross(profile=profile, record=record)
        base_pay = quantize_money(breakdown.base_pay)
        overtime_pay = quantize_money(breakdown.overtime_pay)
        gross = base_pay + overtime_pay
        deductions = rounded_deductions(gross)
        total = deductions.employee_total

        return DailyPayRecord(
            work_date=record.work_date,
            day_context=strategy.context,
            planned_hours=record.planned_hours,
            actual_hours=record.actual_hours,
            overtime_hours=breakdown.overtime_hours,
            hourly_rate=profile.hourly_rate,
            base_pay=base_pay,
            overtime_pay=overtime_pay,
            gross_pay=gross,
            income_tax=deductions.income_tax,
            stamp_tax=deductions.stamp_tax,
            social_security_employee=deductions.social_security_employee,
            unemployment_insurance_employee=deductions.unemployment_insurance_employee,
            total_deductions=total,
            net_pay=gross - total,
        )

    def compute_monthly_pay(
        self,
        profile: RateProfile,
        daily_records: Iterable[DailyPayRecord],
        month: int,
        year: int,
        *,
        policy: TaxAggregationPolicy = TaxAggregationPolicy.PER_MONTH,
    ) -> MonthlyPayRecord:
        validate_period(month, year)
        validate_rate_profile(profile)

        records = list(daily_records)
        seen = set()
        for r in records:
            if r.work_date.month != month or r.work_date.year != year:
                raise InvalidPeriodError(f"Daily record {r.work_date} is outside {year}-{month:02d}")
            if r.work_date in seen:
                raise InvalidPeriodError(f"Duplicate daily record for {r.work_date}")
            seen.add(r.work_date)

        def total(field: str) -> Decimal:
            return sum((getattr(r, field) for r in records), ZERO)

        working_days = count_working_days(month, year)
        gross = total("gross_pay")
        monthly = rounded_deductions(gross)

        if policy == TaxAggregationPolicy.PER_DAY:
            tax = total("income_tax")
            stamp = total("stamp_tax")
            ss_employee = total("social_security_employee")
            ui_employee = total("unemployment_insurance_employee")
        else:
            tax = monthly.income_tax
            stamp = monthly.stamp_tax
            ss_employee = monthly.social_security_employee
            ui_employee = monthly.unemployment_insurance_employee

        deductions_total = tax + stamp + ss_employee + ui_employee

        return MonthlyPayRecord(
            month=month,
            year=year,
            working_days=working_days,
            days_worked=sum(1 for r in records if r.actual_hours > ZERO),
            contracted_hours=profile.planned_daily_hours * working_days,
            planned_hours=total("planned_hours"),
            actual_hours=total("actual_hours"),
            overtime_hours=total("overtime_hours"),
            hourly_rate=profile.hourly_rate,
            base_pay=total("base_pay"),
            overtime_pay=total("overtime_pay"),
            gross_salary=gross,
            income_tax=tax,
            stamp_tax=stamp,
            social_security_employee=ss_employee,
            unemployment_insurance_employee=ui_employee,
            total_deductions=deductions_total,
            net_salary=gross - deductions_total,
            social_security_employer=monthly.social_security_employer,
            unemployment_insurance_employer=monthly.unemployment_insurance_employer,
            total_employer_cost=gross + monthly.social_security_employer + monthly.unemployment_insurance_employer,
            tax_policy=policy,
        )


def compute_daily_pay(profile: RateProfile, record: DailyWorkRecord) -> DailyPayRecord:
    return TurkishPayrollCalculator().compute_daily_pay(profile, record)


def compute_monthly_pay(
    profile: RateProfile,
    daily_records: Iterable[DailyPayRecord],
    month: int,
    year: int,
    *,
    policy: TaxAggregationPolicy = TaxAggregationPolicy.PER_MONTH,
) -> MonthlyPayRecord:
    return TurkishPayrollCalculator().compute_monthly_pay(profile, daily_records, month, year, policy=policy)
