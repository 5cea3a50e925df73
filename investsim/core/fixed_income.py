"""Fixed-income engine: monthly interest is split between payout and reinvestment."""

from __future__ import annotations

import logging
from typing import List

from investsim.core.money import is_year_end, monthly_rate, round_money, year_of
from investsim.schemas.simulation import (
    FixedResult,
    FixedSummary,
    SimulationInput,
    YearlyData,
)

logger = logging.getLogger(__name__)


def reinvested_amount(interest: float, inputs: SimulationInput) -> float:
    """
    Portion of one month's interest that goes back into the balance.

      amount          -> up to reinvestment_value, never more than was earned
      percentage      -> reinvestment_percentage of the interest
      above_threshold -> only what exceeds reinvestment_threshold (floored at 0)
    """
    if inputs.reinvestment_mode == "percentage":
        return interest * (inputs.reinvestment_percentage / 100)
    if inputs.reinvestment_mode == "above_threshold":
        return max(0.0, interest - inputs.reinvestment_threshold)
    return min(interest, inputs.reinvestment_value)


def _summary_reinvestment(inputs: SimulationInput) -> dict:
    mode = inputs.reinvestment_mode
    return {
        "reinvestment_value": inputs.reinvestment_value if mode == "amount" else None,
        "reinvestment_percentage": inputs.reinvestment_percentage if mode == "percentage" else None,
        "reinvestment_threshold": inputs.reinvestment_threshold if mode == "above_threshold" else None,
    }


def simulate_fixed_income(inputs: SimulationInput) -> FixedResult:
    """
    Project an income-producing balance.

    The principal is the initial investment only; monthly contributions are
    not part of this strategy. Each month the interest is computed on the
    current balance, the reinvested part (rounded to cents) is added back and
    the rest is paid out. Yearly rows carry the payout of the year's last
    month as ``monthly_income``.
    """
    rate = monthly_rate(inputs.annual_interest_rate)
    months = max(inputs.years * 12, 0)

    balance = inputs.initial_investment
    total_invested = inputs.initial_investment
    last_payout = 0.0
    rows: List[YearlyData] = []

    for month in range(1, months + 1):
        interest = balance * rate
        reinvest = round_money(reinvested_amount(interest, inputs))
        last_payout = interest - reinvest
        balance += reinvest

        if is_year_end(month, months):
            rows.append(
                YearlyData(
                    year=year_of(month),
                    total_invested=round_money(total_invested),
                    interest_gains=round_money(balance - total_invested),
                    final_balance=round_money(balance),
                    monthly_income=round_money(last_payout),
                )
            )

    logger.debug(
        "fixed income run: mode=%s, %d months, final balance %.2f, last payout %.2f",
        inputs.reinvestment_mode,
        months,
        balance,
        last_payout,
    )

    return FixedResult(
        yearly_data=rows,
        summary=FixedSummary(
            total_invested=round_money(total_invested),
            total_interest=round_money(balance - total_invested),
            final_balance=round_money(balance),
            monthly_income=round_money(last_payout),
            **_summary_reinvestment(inputs),
        ),
        annual_interest_rate=inputs.annual_interest_rate,
    )
