"""Effective annual rate from market indicators."""

from __future__ import annotations

from typing import Optional

from investsim.core.money import round_money
from investsim.schemas.rates import EffectiveRateRequest, MarketIndicators


def cdi_rate(cdi: float, cdi_percent: float) -> float:
    """A product paying `cdi_percent`% of CDI."""
    return cdi * (cdi_percent / 100)


def ipca_plus_rate(ipca: float, fixed: float) -> float:
    """Inflation-linked product: (1 + IPCA) * (1 + fixed) - 1, in percent."""
    return ((1 + ipca / 100) * (1 + fixed / 100) - 1) * 100


def effective_annual_rate(request: EffectiveRateRequest, indicators: MarketIndicators) -> Optional[float]:
    """
    Annual percent rate implied by the request, rounded to cents.

    Returns None in manual mode, where the caller keeps the rate it typed in.
    """
    if request.mode == "cdi":
        return round_money(cdi_rate(indicators.cdi, request.cdi_percent))
    if request.mode == "ipca_plus":
        return round_money(ipca_plus_rate(indicators.ipca, request.ipca_fixed))
    return None
