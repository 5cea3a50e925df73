from __future__ import annotations

from math import isclose

import pytest

from investsim.core.compound import simulate_compound
from investsim.core.fixed_income import reinvested_amount, simulate_fixed_income
from investsim.schemas.simulation import SimulationInput


def fixed_inputs(**overrides) -> SimulationInput:
    values = dict(
        initial_investment=10000,
        annual_interest_rate=12,
        years=1,
        investment_type="fixed",
        reinvestment_mode="amount",
        reinvestment_value=0,
    )
    values.update(overrides)
    return SimulationInput(**values)


def test_no_reinvestment_pays_out_all_interest():
    result = simulate_fixed_income(fixed_inputs(years=3))

    assert result.investment_type == "fixed"
    assert len(result.yearly_data) == 3
    for row in result.yearly_data:
        assert row.final_balance == 10000.0
        assert row.total_invested == 10000.0
        assert row.interest_gains == 0
        assert isclose(row.monthly_income, 100.0, abs_tol=0.01)
    assert isclose(result.summary.monthly_income, 100.0, abs_tol=0.01)


def test_reinvested_amount_never_exceeds_interest():
    inputs = fixed_inputs(reinvestment_value=1_000_000)

    assert reinvested_amount(80.0, inputs) == 80.0
    assert reinvested_amount(80.0, fixed_inputs(reinvestment_value=30)) == 30


def test_full_reinvestment_matches_compound_without_contributions():
    fixed = simulate_fixed_income(fixed_inputs(reinvestment_value=1_000_000, years=2))
    compound = simulate_compound(
        SimulationInput(initial_investment=10000, monthly_contribution=0, annual_interest_rate=12, years=2)
    )

    for fixed_row, compound_row in zip(fixed.yearly_data, compound.yearly_data):
        assert fixed_row.final_balance == pytest.approx(compound_row.final_balance, abs=0.25)
        assert fixed_row.monthly_income == pytest.approx(0, abs=0.01)


def test_percentage_mode_reinvests_share_of_interest():
    result = simulate_fixed_income(fixed_inputs(reinvestment_mode="percentage", reinvestment_percentage=50))

    # first month: 100 interest, 50 back into the balance
    assert reinvested_amount(100.0, fixed_inputs(reinvestment_mode="percentage", reinvestment_percentage=50)) == 50
    row = result.yearly_data[0]
    assert row.final_balance > 10000
    assert row.final_balance == pytest.approx(10000 * (1 + 0.005) ** 12, abs=0.1)
    assert row.monthly_income == pytest.approx(row.final_balance * 0.01 / 2, abs=1.0)


def test_threshold_above_interest_reinvests_nothing():
    result = simulate_fixed_income(fixed_inputs(reinvestment_mode="above_threshold", reinvestment_threshold=500))

    assert reinvested_amount(100.0, fixed_inputs(reinvestment_mode="above_threshold", reinvestment_threshold=500)) == 0
    assert result.yearly_data[0].final_balance == 10000.0
    assert isclose(result.yearly_data[0].monthly_income, 100.0, abs_tol=0.01)


def test_threshold_only_compounds_the_excess():
    inputs = fixed_inputs(reinvestment_mode="above_threshold", reinvestment_threshold=60)

    assert reinvested_amount(100.0, inputs) == 40.0
    result = simulate_fixed_income(inputs)
    # payout stays pinned at the threshold while the balance creeps up
    assert isclose(result.yearly_data[0].monthly_income, 60.0, abs_tol=0.01)
    assert result.yearly_data[0].final_balance > 10000 + 40 * 12


@pytest.mark.parametrize(
    "mode, field, value",
    [
        ("amount", "reinvestment_value", 25.0),
        ("percentage", "reinvestment_percentage", 40.0),
        ("above_threshold", "reinvestment_threshold", 70.0),
    ],
)
def test_summary_echoes_only_the_active_reinvestment_setting(mode, field, value):
    inputs = fixed_inputs(
        reinvestment_mode=mode,
        reinvestment_value=25.0,
        reinvestment_percentage=40.0,
        reinvestment_threshold=70.0,
    )

    summary = simulate_fixed_income(inputs).summary
    echoed = {
        name: getattr(summary, name)
        for name in ("reinvestment_value", "reinvestment_percentage", "reinvestment_threshold")
        if getattr(summary, name) is not None
    }

    assert echoed == {field: value}


def test_monthly_contributions_are_ignored():
    with_deposits = simulate_fixed_income(fixed_inputs(monthly_contribution=500, years=2))
    without = simulate_fixed_income(fixed_inputs(years=2))

    assert with_deposits.yearly_data == without.yearly_data
    assert with_deposits.summary.total_invested == 10000


def test_zero_years_returns_initial_state():
    result = simulate_fixed_income(fixed_inputs(years=0))

    assert result.yearly_data == []
    assert result.summary.final_balance == 10000
    assert result.summary.monthly_income == 0
