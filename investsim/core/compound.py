"""Compound interest engine."""

from __future__ import annotations

import logging
from typing import List

from investsim.core.money import is_year_end, monthly_rate, round_money, year_of
from investsim.schemas.simulation import (
    CompoundResult,
    CompoundSummary,
    SimulationInput,
    YearlyData,
)

logger = logging.getLogger(__name__)


def simulate_compound(inputs: SimulationInput) -> CompoundResult:
    """
    Grow a balance with monthly deposits and monthly compounding.

    Order of operations (per month):
      1) Deposit the monthly contribution.
      2) Apply one month of interest to the whole balance (deposit included).
      3) On a year end, record a row rounded to cents.

    A horizon of zero (or negative) years records nothing and the summary is
    the untouched initial investment.
    """
    rate = monthly_rate(inputs.annual_interest_rate)
    months = max(inputs.years * 12, 0)

    balance = inputs.initial_investment
    rows: List[YearlyData] = []

    for month in range(1, months + 1):
        balance += inputs.monthly_contribution
        balance *= 1 + rate

        if is_year_end(month, months):
            invested = inputs.initial_investment + inputs.monthly_contribution * month
            rows.append(
                YearlyData(
                    year=year_of(month),
                    total_invested=round_money(invested),
                    interest_gains=round_money(balance - invested),
                    final_balance=round_money(balance),
                )
            )

    total_invested = inputs.initial_investment + inputs.monthly_contribution * months
    logger.debug("compound run: %d months, final balance %.2f", months, balance)

    return CompoundResult(
        yearly_data=rows,
        summary=CompoundSummary(
            total_invested=round_money(total_invested),
            total_interest=round_money(balance - total_invested),
            final_balance=round_money(balance),
        ),
        annual_interest_rate=inputs.annual_interest_rate,
    )
