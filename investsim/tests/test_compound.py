from __future__ import annotations

from math import isclose

from investsim.core.compound import simulate_compound
from investsim.schemas.simulation import SimulationInput


def _recurrence(initial: float, contribution: float, annual_rate: float, months: int) -> float:
    balance = initial
    for _ in range(months):
        balance = (balance + contribution) * (1 + annual_rate / 1200)
    return balance


def test_one_year_matches_direct_recurrence():
    inputs = SimulationInput(initial_investment=1000, monthly_contribution=200, annual_interest_rate=12, years=1)

    result = simulate_compound(inputs)

    expected = _recurrence(1000, 200, 12, 12)
    assert isclose(expected, 3688.69, abs_tol=0.01)
    assert len(result.yearly_data) == 1
    row = result.yearly_data[0]
    assert row.year == 1
    assert isclose(row.final_balance, expected, abs_tol=0.01)
    assert row.total_invested == 3400.0
    assert isclose(row.interest_gains, expected - 3400, abs_tol=0.01)
    assert row.monthly_income is None


def test_summary_matches_last_year():
    inputs = SimulationInput(initial_investment=5000, monthly_contribution=150, annual_interest_rate=9.5, years=20)

    result = simulate_compound(inputs)

    last = result.yearly_data[-1]
    assert result.investment_type == "compound"
    assert [row.year for row in result.yearly_data] == list(range(1, 21))
    assert result.summary.final_balance == last.final_balance
    assert result.summary.total_invested == last.total_invested == 5000 + 150 * 240
    assert isclose(result.summary.total_interest, last.interest_gains, abs_tol=0.01)


def test_zero_rate_accumulates_contributions_only():
    """
    With no interest, the balance is the initial amount plus every deposit so far
    """
    inputs = SimulationInput(initial_investment=1000, monthly_contribution=100, annual_interest_rate=0, years=3)

    result = simulate_compound(inputs)

    assert [row.final_balance for row in result.yearly_data] == [2200.0, 3400.0, 4600.0]
    assert all(row.interest_gains == 0 for row in result.yearly_data)


def test_balance_never_decreases_with_non_negative_inputs():
    inputs = SimulationInput(initial_investment=250, monthly_contribution=75, annual_interest_rate=7, years=30)

    balances = [row.final_balance for row in simulate_compound(inputs).yearly_data]

    assert all(later >= earlier for earlier, later in zip(balances, balances[1:]))


def test_zero_years_gives_empty_series_and_initial_summary():
    inputs = SimulationInput(initial_investment=1234.567, monthly_contribution=100, annual_interest_rate=10, years=0)

    result = simulate_compound(inputs)

    assert result.yearly_data == []
    assert result.summary.final_balance == 1234.57
    assert result.summary.total_invested == 1234.57
    assert result.summary.total_interest == 0


def test_negative_years_degrade_like_zero():
    inputs = SimulationInput(initial_investment=800, monthly_contribution=50, annual_interest_rate=5, years=-3)

    result = simulate_compound(inputs)

    assert result.yearly_data == []
    assert result.summary.final_balance == 800
    assert result.summary.total_invested == 800
