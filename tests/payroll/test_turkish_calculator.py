from datetime import date
from decimal import Decimal

import pytest

from src.salon_crm.salon_crm.core.enums import DayContext
from src.salon_crm.salon_crm.core.exceptions import InvalidHoursError, InvalidRateError
from src.salon_crm.salon_crm.payroll.calculator.turkish_calculator import compute_daily_pay
from src.salon_crm.salon_crm.payroll.model import RateProfile
from tests.fakes import MONDAY, SATURDAY, work_day


def test_standard_day_without_overtime(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(MONDAY, "8"))

    assert rec.day_context == DayContext.STANDARD
    assert rec.base_pay == Decimal("800")
    assert rec.overtime_pay == Decimal("0")
    assert rec.gross_pay == Decimal("800")
    assert rec.income_tax == Decimal("120")
    assert rec.stamp_tax == Decimal("6.07")
    assert rec.social_security_employee == Decimal("112")
    assert rec.unemployment_insurance_employee == Decimal("8")
    assert rec.total_deductions == Decimal("246.07")
    assert rec.net_pay == Decimal("553.93")


def test_standard_day_with_overtime(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(MONDAY, "10"))

    assert rec.overtime_hours == Decimal("2")
    assert rec.base_pay == Decimal("800")
    assert rec.overtime_pay == Decimal("300")
    assert rec.gross_pay == Decimal("1100")
    assert rec.income_tax == Decimal("165")


def test_weekend_pays_flat_multiplier(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(SATURDAY, "6"))

    assert rec.day_context == DayContext.WEEKEND
    assert rec.is_weekend
    assert rec.gross_pay == Decimal("750")
    assert rec.overtime_pay == Decimal("0")


def test_weekend_has_no_overtime_premium_but_reports_hours(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(SATURDAY, "10"))

    assert rec.overtime_hours == Decimal("2")
    assert rec.overtime_pay == Decimal("0")
    assert rec.gross_pay == Decimal("1250")


def test_holiday_beats_weekend(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(SATURDAY, "8", holiday=True))

    assert rec.day_context == DayContext.HOLIDAY
    assert rec.gross_pay == Decimal("1600")


def test_long_holiday_is_paid_flat(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(MONDAY, "12", holiday=True))

    assert rec.gross_pay == Decimal("2400")
    assert rec.overtime_hours == Decimal("4")


def test_zero_hours_is_zero_pay(calculator, profile):
    rec = calculator.compute_daily_pay(profile, work_day(MONDAY, "0"))

    assert rec.gross_pay == 0
    assert rec.net_pay == 0
    assert rec.total_deductions == 0


def test_more_hours_never_lower_gross(calculator, profile):
    for day, holiday in ((MONDAY, False), (SATURDAY, False), (MONDAY, True)):
        previous = Decimal("-1")
        for quarter in range(0, 64):
            hours = Decimal(quarter) / 4
            gross = calculator.compute_daily_pay(profile, work_day(day, str(hours), holiday=holiday)).gross_pay
            assert gross >= previous
            previous = gross


def test_net_pay_bounds(calculator):
    for rate in ("0", "37.5", "100", "2500"):
        profile = RateProfile(hourly_rate=Decimal(rate))
        rec = calculator.compute_daily_pay(profile, work_day(MONDAY, "11"))
        assert Decimal("0") <= rec.net_pay <= rec.gross_pay


def test_same_input_same_output(profile):
    record = work_day(date(2025, 3, 5), "9.25")
    assert compute_daily_pay(profile, record) == compute_daily_pay(profile, record)


@pytest.mark.parametrize(
    "overrides",
    [
        {"hourly_rate": Decimal("-1")},
        {"overtime_rate": Decimal("0.5")},
        {"weekend_rate": Decimal("-1.25")},
        {"holiday_rate": Decimal("0")},
        {"planned_daily_hours": Decimal("0")},
        {"planned_daily_hours": Decimal("24.01")},
    ],
)
def test_invalid_rate_profile(calculator, overrides):
    values = {"hourly_rate": Decimal("100"), **overrides}
    with pytest.raises(InvalidRateError):
        calculator.compute_daily_pay(RateProfile(**values), work_day(MONDAY, "8"))


def test_planned_daily_hours_of_24_is_allowed(calculator):
    profile = RateProfile(hourly_rate=Decimal("100"), planned_daily_hours=Decimal("24"))
    assert calculator.compute_daily_pay(profile, work_day(MONDAY, "8")).gross_pay == Decimal("800")


@pytest.mark.parametrize("actual, planned", [("-1", "8"), ("8", "-0.5")])
def test_negative_hours_rejected(calculator, profile, actual, planned):
    with pytest.raises(InvalidHoursError):
        calculator.compute_daily_pay(profile, work_day(MONDAY, actual, planned=planned))


def test_to_row_rounds_to_kurus(calculator, profile):
    row = calculator.compute_daily_pay(profile, work_day(MONDAY, "8")).to_row()

    assert row["stamp_tax"] == Decimal("6.07")
    assert row["net_pay"] == Decimal("553.93")
    assert row["day_context"] == "standard"


def test_money_is_rounded_per_item(calculator, profile):
    # 445 minutes = 7.41666... hours
    rec = calculator.compute_daily_pay(profile, work_day(MONDAY, str(Decimal(445) / Decimal(60))))

    assert rec.gross_pay == Decimal("741.67")
    assert rec.stamp_tax == Decimal("5.63")
    assert rec.total_deductions == rec.income_tax + rec.stamp_tax + rec.social_security_employee + rec.unemployment_insurance_employee
    assert rec.net_pay == rec.gross_pay - rec.total_deductions
    assert rec.to_row()["net_pay"] == rec.net_pay
