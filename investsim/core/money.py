"""Money and period helpers shared by the engines."""

from __future__ import annotations

from math import ceil, isfinite


def round_money(value: float) -> float:
    """Round to cents. NaN and infinities become 0 so results are always printable."""
    if not isfinite(value):
        return 0.0
    return round(float(value), 2)


def monthly_rate(annual_rate_percent: float) -> float:
    """Annual percent (e.g. 12) to a monthly fraction (0.01)."""
    return annual_rate_percent / 100 / 12


def is_year_end(month: int, months: int) -> bool:
    return month % 12 == 0 or month == months


def year_of(month: int) -> int:
    return ceil(month / 12)
