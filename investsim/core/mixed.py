"""
Mixed strategy: one strategy for the first years, the other for the rest.

Phase 1 runs `switch_to_fixed_year` years; phase 2 covers the remaining
horizon. At the switch the balance either moves entirely to the phase-2
strategy or, when a split is requested, is divided into a migrated part
(phase-2 strategy) and a retained part that keeps running under the phase-1
strategy. Monthly contributions only ever feed the compound phase.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Union

from investsim.core.compound import simulate_compound
from investsim.core.fixed_income import simulate_fixed_income
from investsim.core.money import round_money
from investsim.schemas.simulation import (
    EventKind,
    EventLogItem,
    MixedResult,
    MixedSummary,
    PhaseResult,
    PhaseType,
    SimulationInput,
    SplitSummary,
    SplitYearlyData,
    YearlyData,
)

logger = logging.getLogger(__name__)

# Phases dispatch here and never through core.simulator, so a phase can't be "mixed".
PHASE_ENGINES: Dict[PhaseType, Callable[[SimulationInput], PhaseResult]] = {
    "compound": simulate_compound,
    "fixed": simulate_fixed_income,
}

# message ids understood by the presentation layer
PHASE_LABELS: Dict[PhaseType, str] = {
    "compound": "compoundInterest",
    "fixed": "fixedIncome",
}


def phase_types(inputs: SimulationInput) -> tuple[PhaseType, PhaseType]:
    if inputs.mixed_investment_order == "compound_first":
        return "compound", "fixed"
    return "fixed", "compound"


def _event(
    year: int,
    kind: EventKind,
    description_key: str = "",
    **values: Union[float, str, None],
) -> EventLogItem:
    title = kind.capitalize()
    return EventLogItem(
        year=year,
        kind=kind,
        title_key=f"event{title}Title",
        description_key=description_key or f"event{title}Desc",
        values={key: value for key, value in values.items() if value is not None},
    )


def _run_phase(
    inputs: SimulationInput,
    phase_type: PhaseType,
    *,
    initial_investment: float,
    years: int,
    monthly_contribution: float,
    annual_interest_rate: float,
) -> PhaseResult:
    phase_inputs = inputs.model_copy(
        update={
            "investment_type": phase_type,
            "initial_investment": initial_investment,
            "years": years,
            "monthly_contribution": monthly_contribution,
            "annual_interest_rate": annual_interest_rate,
        }
    )
    return PHASE_ENGINES[phase_type](phase_inputs)


def is_actual_split(inputs: SimulationInput, balance_at_switch: float) -> bool:
    """A split only happens when it leaves something on both sides."""
    if not inputs.enable_split:
        return False
    if inputs.split_mode == "amount":
        return 0 < inputs.split_value < balance_at_switch
    return 0 < inputs.split_percentage < 100


def _build_result(
    inputs: SimulationInput,
    rows: List[YearlyData],
    summary: MixedSummary,
    events: List[EventLogItem],
) -> MixedResult:
    return MixedResult(
        yearly_data=rows,
        summary=summary,
        event_log=events,
        annual_interest_rate=inputs.annual_interest_rate,
        annual_interest_rate_phase2=inputs.annual_interest_rate_phase2,
        switch_to_fixed_year=inputs.switch_to_fixed_year,
        mixed_investment_order=inputs.mixed_investment_order,
        enable_split=inputs.enable_split,
        split_mode=inputs.split_mode,
        split_value=inputs.split_value if inputs.split_mode == "amount" else None,
        split_percentage=inputs.split_percentage if inputs.split_mode == "percentage" else None,
    )


def simulate_mixed(inputs: SimulationInput) -> MixedResult:
    """
    Run both phases and stitch them into one yearly series plus an event log.

    Events always come out as start (year 0), switch, optional split (same
    year as switch), end (last year).
    """
    phase1_type, phase2_type = phase_types(inputs)
    phase1_label, phase2_label = PHASE_LABELS[phase1_type], PHASE_LABELS[phase2_type]

    # Phase 1 never runs past the horizon.
    horizon = max(inputs.years, 0)
    phase1_years = min(max(inputs.switch_to_fixed_year, 0), horizon)
    phase2_years = horizon - phase1_years

    phase1_rate = inputs.annual_interest_rate
    phase2_rate = (
        inputs.annual_interest_rate_phase2
        if inputs.annual_interest_rate_phase2 is not None
        else inputs.annual_interest_rate
    )
    phase1_contribution = inputs.monthly_contribution if phase1_type == "compound" else 0.0
    phase2_contribution = inputs.monthly_contribution if phase2_type == "compound" else 0.0

    events = [_event(0, "start", amount=inputs.initial_investment, type=phase1_label)]

    phase1 = _run_phase(
        inputs,
        phase1_type,
        initial_investment=inputs.initial_investment,
        years=phase1_years,
        monthly_contribution=phase1_contribution,
        annual_interest_rate=phase1_rate,
    )

    if phase2_years <= 0:
        logger.debug("mixed run: phase 1 covers the whole %d-year horizon", horizon)
        events.append(_event(inputs.years, "end", amount=phase1.summary.final_balance))
        summary = MixedSummary(
            total_invested=phase1.summary.total_invested,
            total_interest=phase1.summary.total_interest,
            final_balance=phase1.summary.final_balance,
            monthly_income=getattr(phase1.summary, "monthly_income", None),
        )
        return _build_result(inputs, list(phase1.yearly_data), summary, events)

    events.append(_event(phase1_years, "switch", fromType=phase1_label, toType=phase2_label))

    balance_at_switch = phase1.summary.final_balance
    invested_at_switch = phase1.summary.total_invested

    if is_actual_split(inputs, balance_at_switch):
        return _simulate_split(
            inputs,
            phase1,
            events,
            phase1_type=phase1_type,
            phase2_type=phase2_type,
            phase1_years=phase1_years,
            phase2_years=phase2_years,
            phase1_rate=phase1_rate,
            phase2_rate=phase2_rate,
            phase2_contribution=phase2_contribution,
        )

    if inputs.enable_split:
        logger.debug(
            "mixed run: split requested but out of bounds (mode=%s, balance at switch %.2f); not splitting",
            inputs.split_mode,
            balance_at_switch,
        )

    phase2 = _run_phase(
        inputs,
        phase2_type,
        initial_investment=balance_at_switch,
        years=phase2_years,
        monthly_contribution=phase2_contribution,
        annual_interest_rate=phase2_rate,
    )

    rows: List[YearlyData] = list(phase1.yearly_data)
    for row in phase2.yearly_data:
        invested = invested_at_switch + phase2_contribution * 12 * row.year
        rows.append(
            row.model_copy(
                update={
                    "year": row.year + phase1_years,
                    "total_invested": round_money(invested),
                    "interest_gains": round_money(row.final_balance - invested),
                }
            )
        )

    last = rows[-1]
    events.append(_event(inputs.years, "end", amount=last.final_balance))

    summary = MixedSummary(
        total_invested=last.total_invested,
        total_interest=last.interest_gains,
        final_balance=last.final_balance,
        monthly_income=getattr(phase2.summary, "monthly_income", None),
    )
    return _build_result(inputs, rows, summary, events)


def _simulate_split(
    inputs: SimulationInput,
    phase1: PhaseResult,
    events: List[EventLogItem],
    *,
    phase1_type: PhaseType,
    phase2_type: PhaseType,
    phase1_years: int,
    phase2_years: int,
    phase1_rate: float,
    phase2_rate: float,
    phase2_contribution: float,
) -> MixedResult:
    """Divide the switch balance and run both legs side by side for phase 2."""
    balance_at_switch = phase1.summary.final_balance
    invested_at_switch = phase1.summary.total_invested

    if inputs.split_mode == "amount":
        migrated = inputs.split_value
        retained = balance_at_switch - inputs.split_value
        retained_percentage = retained / balance_at_switch * 100
        migrated_percentage = None
        description_key = "eventSplitDescAmount"
    else:
        migrated = balance_at_switch * (inputs.split_percentage / 100)
        retained = balance_at_switch * (1 - inputs.split_percentage / 100)
        retained_percentage = 100 - inputs.split_percentage
        migrated_percentage = inputs.split_percentage
        description_key = "eventSplitDesc"

    events.append(
        _event(
            phase1_years,
            "split",
            description_key,
            migratedAmount=round_money(migrated),
            migratedPercentage=migrated_percentage,
            toType=PHASE_LABELS[phase2_type],
            retainedAmount=round_money(retained),
            retainedPercentage=round_money(retained_percentage),
            fromType=PHASE_LABELS[phase1_type],
        )
    )
    logger.debug("mixed run: split %.2f migrated / %.2f retained", migrated, retained)

    migrated_leg = _run_phase(
        inputs,
        phase2_type,
        initial_investment=migrated,
        years=phase2_years,
        monthly_contribution=phase2_contribution,
        annual_interest_rate=phase2_rate,
    )
    # The retained leg is parked: no further deposits.
    retained_leg = _run_phase(
        inputs,
        phase1_type,
        initial_investment=retained,
        years=phase2_years,
        monthly_contribution=0.0,
        annual_interest_rate=phase1_rate,
    )

    rows: List[YearlyData] = list(phase1.yearly_data)
    for index, (retained_row, migrated_row) in enumerate(
        zip(retained_leg.yearly_data, migrated_leg.yearly_data)
    ):
        balance = retained_row.final_balance + migrated_row.final_balance
        invested = invested_at_switch + phase2_contribution * 12 * (index + 1)

        income = 0.0
        if phase1_type == "fixed" and retained_row.monthly_income:
            income += retained_row.monthly_income
        if phase2_type == "fixed" and migrated_row.monthly_income:
            income += migrated_row.monthly_income

        rows.append(
            SplitYearlyData(
                year=phase1_years + index + 1,
                total_invested=round_money(invested),
                interest_gains=round_money(balance - invested),
                final_balance=round_money(balance),
                monthly_income=round_money(income) if income > 0 else None,
                retained_balance=retained_row.final_balance,
                migrated_balance=migrated_row.final_balance,
            )
        )

    last = rows[-1]
    events.append(_event(inputs.years, "end", amount=last.final_balance))

    summary = SplitSummary(
        total_invested=last.total_invested,
        total_interest=last.interest_gains,
        final_balance=last.final_balance,
        monthly_income=last.monthly_income,
        initial_retained_balance=round_money(retained),
        initial_migrated_balance=round_money(migrated),
    )
    return _build_result(inputs, rows, summary, events)
