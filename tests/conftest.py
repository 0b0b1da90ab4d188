from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from src.salon_crm.salon_crm.payroll.calculator.turkish_calculator import TurkishPayrollCalculator
from src.salon_crm.salon_crm.payroll.model import RateProfile


@pytest.fixture
def profile() -> RateProfile:
    return RateProfile(hourly_rate=Decimal("100"))


@pytest.fixture
def calculator() -> TurkishPayrollCalculator:
    return TurkishPayrollCalculator()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 3, 9, 0, 0)
