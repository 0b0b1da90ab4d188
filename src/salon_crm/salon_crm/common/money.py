from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")


def quantize_money(value: Decimal) -> Decimal:
    """Round to kuruş (2 places) for storage and display."""
    return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def format_try(value: Decimal) -> str:
    return f"{quantize_money(value):,.2f} ₺"
