from decimal import Decimal

from src.salon_crm.salon_crm.core.constants import FALLBACK_HOURLY_RATE
from src.salon_crm.salon_crm.employees.model import Employee
from src.salon_crm.salon_crm.payroll.model import DEFAULT_RATE_PROFILE


def _employee(**kwargs) -> Employee:
    return Employee(employee_id="e1", user_id="u1", first_name="Ayşe", last_name="Yılmaz", **kwargs)


def test_explicit_hourly_rate_wins():
    emp = _employee(hourly_rate=Decimal("120"), monthly_salary=Decimal("50000"))
    assert emp.resolve_hourly_rate() == Decimal("120")


def test_hourly_rate_from_monthly_salary():
    emp = _employee(hourly_rate=Decimal("0"), monthly_salary=Decimal("17600"))
    assert emp.resolve_hourly_rate() == Decimal("100")


def test_monthly_salary_uses_employee_daily_hours():
    emp = _employee(monthly_salary=Decimal("22000"), daily_working_hours=Decimal("10"))
    assert emp.resolve_hourly_rate() == Decimal("100")


def test_fallback_hourly_rate():
    assert _employee().resolve_hourly_rate() == FALLBACK_HOURLY_RATE


def test_missing_columns_use_default_profile():
    profile = _employee(hourly_rate=Decimal("80")).rate_profile()

    assert profile.hourly_rate == Decimal("80")
    assert profile.overtime_rate == DEFAULT_RATE_PROFILE.overtime_rate == Decimal("1.50")
    assert profile.weekend_rate == DEFAULT_RATE_PROFILE.weekend_rate == Decimal("1.25")
    assert profile.holiday_rate == DEFAULT_RATE_PROFILE.holiday_rate == Decimal("2.00")
    assert profile.planned_daily_hours == DEFAULT_RATE_PROFILE.planned_daily_hours == Decimal("8.00")


def test_custom_rates_are_kept():
    profile = _employee(
        hourly_rate=Decimal("80"),
        overtime_rate=Decimal("2.00"),
        weekend_rate=Decimal("1.50"),
        holiday_rate=Decimal("3.00"),
        daily_working_hours=Decimal("7.5"),
    ).rate_profile()

    assert profile.overtime_rate == Decimal("2.00")
    assert profile.weekend_rate == Decimal("1.50")
    assert profile.holiday_rate == Decimal("3.00")
    assert profile.planned_daily_hours == Decimal("7.5")


def test_session_user_id_falls_back_to_employee_id():
    emp = Employee(employee_id="e9", user_id=None, first_name="Can", last_name="Demir")
    assert emp.session_user_id == "e9"
    assert emp.full_name == "Can Demir"
