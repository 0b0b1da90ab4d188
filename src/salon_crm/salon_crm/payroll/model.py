from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from ..common.datetime_utils import is_weekend
from ..common.money import ZERO, quantize_money
from ..core.enums import DayContext, TaxAggregationPolicy


@dataclass(frozen=True)
class RateProfile:
    """Per-employee pay configuration. Multipliers are applied on top of hourly_rate."""

    hourly_rate: Decimal
    overtime_rate: Decimal = Decimal("1.50")
    weekend_rate: Decimal = Decimal("1.25")
    holiday_rate: Decimal = Decimal("2.00")
    planned_daily_hours: Decimal = Decimal("8.00")


DEFAULT_RATE_PROFILE = RateProfile(hourly_rate=ZERO)


@dataclass(frozen=True)
class DailyWorkRecord:
    """Hours one employee worked on one calendar date."""

    work_date: date
    planned_hours: Decimal
    actual_hours: Decimal
    is_holiday: bool = False

    @property
    def is_weekend(self) -> bool:
        return is_weekend(self.work_date)


@dataclass(frozen=True)
class StatutoryDeductions:
    income_tax: Decimal
    stamp_tax: Decimal
    social_security_employee: Decimal
    unemployment_insurance_employee: Decimal
    social_security_employer: Decimal
    unemployment_insurance_employer: Decimal

    @property
    def employee_total(self) -> Decimal:
        return (
            self.income_tax
            + self.stamp_tax
            + self.social_security_employee
            + self.unemployment_insurance_employee
        )


@dataclass(frozen=True)
class DailyPayRecord:
    """Read-model of a computed day. Money fields are already rounded to kuruş."""

    work_date: date
    day_context: DayContext
    planned_hours: Decimal
    actual_hours: Decimal
    overtime_hours: Decimal
    hourly_rate: Decimal
    base_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    income_tax: Decimal
    stamp_tax: Decimal
    social_security_employee: Decimal
    unemployment_insurance_employee: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    @property
    def is_weekend(self) -> bool:
        return is_weekend(self.work_date)

    @property
    def is_holiday(self) -> bool:
        return self.day_context == DayContext.HOLIDAY

    def to_row(self) -> dict[str, Any]:
        return _rounded(asdict(self))


@dataclass(frozen=True)
class MonthlyPayRecord:
    month: int
    year: int
    working_days: int
    days_worked: int
    contracted_hours: Decimal
    planned_hours: Decimal
    actual_hours: Decimal
    overtime_hours: Decimal
    hourly_rate: Decimal
    base_pay: Decimal
    overtime_pay: Decimal
    gross_salary: Decimal
    income_tax: Decimal
    stamp_tax: Decimal
    social_security_employee: Decimal
    unemployment_insurance_employee: Decimal
    total_deductions: Decimal
    net_salary: Decimal
    social_security_employer: Decimal
    unemployment_insurance_employer: Decimal
    total_employer_cost: Decimal
    tax_policy: TaxAggregationPolicy = field(default=TaxAggregationPolicy.PER_MONTH)

    def to_row(self) -> dict[str, Any]:
        return _rounded(asdict(self))


def _rounded(row: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in row.items():
        if isinstance(value, Decimal):
            out[key] = quantize_money(value)
        elif isinstance(value, (DayContext, TaxAggregationPolicy)):
            out[key] = value.value
        else:
            out[key] = value
    return out
