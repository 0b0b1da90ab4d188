"""Turkish statutory payroll deductions (2025 monthly tables).

Pure functions over ``Decimal``. No rounding happens here; callers round at
the storage boundary.

The income-tax bracket table is a monthly table, but it is applied to
whatever gross it receives, including a single day's gross. Daily records
therefore carry the tax a month of that gross would attract in its first
bracket, which is how the figures have always been produced.
"""

from __future__ import annotations

from decimal import Decimal

from ..common.money import ZERO
from .model import StatutoryDeductions

# (upper bound of bracket, marginal rate); None means unbounded
INCOME_TAX_BRACKETS: tuple[tuple[Decimal | None, Decimal], ...] = (
    (Decimal("7000"), Decimal("0.15")),
    (Decimal("25000"), Decimal("0.20")),
    (Decimal("55000"), Decimal("0.27")),
    (None, Decimal("0.35")),
)

STAMP_TAX_RATE = Decimal("0.00759")
SOCIAL_SECURITY_EMPLOYEE_RATE = Decimal("0.14")
UNEMPLOYMENT_INSURANCE_EMPLOYEE_RATE = Decimal("0.01")
SOCIAL_SECURITY_EMPLOYER_RATE = Decimal("0.155")
UNEMPLOYMENT_INSURANCE_EMPLOYER_RATE = Decimal("0.02")


def income_tax(gross: Decimal) -> Decimal:
    """Progressive income tax for ``gross``.

    Each bracket taxes only the slice of gross that falls inside it, so the
    function is continuous at every boundary: income_tax(7000) == 1050.
    """
    if gross <= ZERO:
        return ZERO

    tax = ZERO
    lower = ZERO
    for upper, rate in INCOME_TAX_BRACKETS:
        if upper is None or gross <= upper:
            return tax + (gross - lower) * rate
        tax += (upper - lower) * rate
        lower = upper
    return tax


def compute_deductions(gross: Decimal) -> StatutoryDeductions:
    return StatutoryDeductions(
        income_tax=income_tax(gross),
        stamp_tax=gross * STAMP_TAX_RATE,
        social_security_employee=gross * SOCIAL_SECURITY_EMPLOYEE_RATE,
        unemployment_insurance_employee=gross * UNEMPLOYMENT_INSURANCE_EMPLOYEE_RATE,
        social_security_employer=gross * SOCIAL_SECURITY_EMPLOYER_RATE,
        unemployment_insurance_employer=gross * UNEMPLOYMENT_INSURANCE_EMPLOYER_RATE,
    )

