from decimal import Decimal

import pytest

from src.salon_crm.salon_crm.payroll.tax import compute_deductions, income_tax


@pytest.mark.parametrize(
    "gross, expected",
    [
        ("0", "0"),
        ("800", "120"),
        ("7000", "1050"),
        ("7000.01", "1050.002"),
        ("16000", "2850"),
        ("25000", "4650"),
        ("55000", "12750"),
        ("60000", "14500"),
    ],
)
def test_income_tax_brackets(gross, expected):
    assert income_tax(Decimal(gross)) == Decimal(expected)


def test_income_tax_is_continuous_at_bracket_edges():
    eps = Decimal("0.0001")
    for edge in (Decimal("7000"), Decimal("25000"), Decimal("55000")):
        assert abs(income_tax(edge + eps) - income_tax(edge)) < Decimal("0.001")


def test_deductions_for_800():
    d = compute_deductions(Decimal("800"))

    assert d.stamp_tax == Decimal("6.072")
    assert d.social_security_employee == Decimal("112")
    assert d.unemployment_insurance_employee == Decimal("8")
    assert d.employee_total == Decimal("246.072")
    assert d.social_security_employer == Decimal("124")
    assert d.unemployment_insurance_employer == Decimal("16")


def test_employee_deductions_stay_below_gross():
    for gross in ("1", "999.99", "7000", "30000", "1000000"):
        d = compute_deductions(Decimal(gross))
        assert Decimal("0") <= d.employee_total < Decimal(gross)
