from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MONEY_QUANT


def to_money(amount: Decimal) -> Decimal:
    return amount.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def format_hours(hours: Decimal) -> str:
    """Render hours as HH:MM (e.g. 37.5 -> '37:30')."""
    total_minutes = int((hours * 60).to_integral_value(rounding=ROUND_HALF_UP))
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
