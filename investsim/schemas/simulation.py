"""Data contracts for investment growth simulations."""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

InvestmentType = Literal["compound", "fixed", "mixed"]
# A mixed run is always composed of these two; a phase is never itself mixed.
PhaseType = Literal["compound", "fixed"]
ReinvestmentMode = Literal["amount", "percentage", "above_threshold"]
MixedInvestmentOrder = Literal["compound_first", "fixed_first"]
SplitMode = Literal["amount", "percentage"]
EventKind = Literal["start", "switch", "split", "end"]


class Record(BaseModel):
    """Immutable value record, snake_case in Python and camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# -----------------------------
# Engine input
# -----------------------------


class SimulationInput(Record):
    """
    Parameters for one simulation run.

    The engine does not validate ranges: callers are expected to hand it
    clamped values (see core.form). Anything unusual degrades to an empty
    or zero result instead of raising.
    """

    initial_investment: float = 0.0
    monthly_contribution: float = 0.0
    annual_interest_rate: float = 0.0
    annual_interest_rate_phase2: Optional[float] = None
    years: int = 0
    # Unknown or missing types run as "compound".
    investment_type: Optional[str] = "compound"

    reinvestment_mode: ReinvestmentMode = "amount"
    reinvestment_value: float = 0.0
    reinvestment_percentage: float = 0.0
    reinvestment_threshold: float = 0.0

    switch_to_fixed_year: int = 1
    mixed_investment_order: MixedInvestmentOrder = "compound_first"
    enable_split: bool = False
    split_mode: SplitMode = "percentage"
    split_value: float = 0.0
    split_percentage: float = 100.0


# -----------------------------
# Request body for the HTTP layer
# -----------------------------


class SimulationRequest(BaseModel):
    """Raw calculator form values as posted by the frontend."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    initial_investment: float = Field(..., ge=0, description="Amount invested at month 0.")
    monthly_contribution: float = Field(0.0, ge=0, description="Deposit made at the start of each month.")
    annual_interest_rate: float = Field(..., ge=0, le=100, description="Annual rate in percent (e.g. 12 for 12%).")
    annual_interest_rate_phase2: Optional[float] = Field(None, ge=0, le=100)
    years: int = Field(..., ge=1, description="Projection horizon in years.")
    investment_type: InvestmentType = "compound"

    reinvestment_mode: ReinvestmentMode = "amount"
    reinvestment_value: Optional[float] = Field(None, ge=0)
    reinvestment_percentage: Optional[float] = Field(None, ge=0, le=100)
    reinvestment_threshold: Optional[float] = Field(None, ge=0)

    switch_to_fixed_year: Optional[int] = Field(None, ge=1)
    mixed_investment_order: MixedInvestmentOrder = "compound_first"
    enable_split: bool = False
    split_mode: SplitMode = "percentage"
    split_value: Optional[float] = Field(None, ge=0)
    split_percentage: Optional[float] = Field(None, ge=0, le=100)


# -----------------------------
# Engine output
# -----------------------------


class YearlyData(Record):
    """Snapshot at the end of one simulated year."""

    year: int = Field(..., ge=1)
    total_invested: float
    interest_gains: float
    final_balance: float
    # last month's payout, income-producing strategies only
    monthly_income: Optional[float] = None


class SplitYearlyData(YearlyData):
    """Post-switch year of a split mixed run, with both sub-balances."""

    retained_balance: float
    migrated_balance: float


class Summary(Record):
    total_invested: float
    total_interest: float
    final_balance: float


class CompoundSummary(Summary):
    pass


class FixedSummary(Summary):
    """Only the reinvestment parameter of the active mode is set."""

    monthly_income: float
    reinvestment_value: Optional[float] = None
    reinvestment_percentage: Optional[float] = None
    reinvestment_threshold: Optional[float] = None


class MixedSummary(Summary):
    monthly_income: Optional[float] = None


class SplitSummary(MixedSummary):
    initial_retained_balance: float
    initial_migrated_balance: float


class EventLogItem(Record):
    """Milestone of a mixed run; keys are message ids for the presentation layer."""

    year: int
    kind: EventKind
    title_key: str
    description_key: str
    values: Dict[str, Union[float, str]] = Field(default_factory=dict)


class CompoundResult(Record):
    investment_type: Literal["compound"] = "compound"
    yearly_data: List[YearlyData]
    summary: CompoundSummary
    annual_interest_rate: float


class FixedResult(Record):
    investment_type: Literal["fixed"] = "fixed"
    yearly_data: List[YearlyData]
    summary: FixedSummary
    annual_interest_rate: float


class MixedResult(Record):
    investment_type: Literal["mixed"] = "mixed"
    yearly_data: List[Union[SplitYearlyData, YearlyData]]
    summary: Union[SplitSummary, MixedSummary]
    event_log: List[EventLogItem]
    annual_interest_rate: float
    annual_interest_rate_phase2: Optional[float] = None
    switch_to_fixed_year: int
    mixed_investment_order: MixedInvestmentOrder
    enable_split: bool
    split_mode: SplitMode
    split_value: Optional[float] = None
    split_percentage: Optional[float] = None


SimulationResult = Annotated[
    Union[CompoundResult, FixedResult, MixedResult],
    Field(discriminator="investment_type"),
]

PhaseResult = Union[CompoundResult, FixedResult]


__all__ = [
    "InvestmentType",
    "PhaseType",
    "ReinvestmentMode",
    "MixedInvestmentOrder",
    "SplitMode",
    "EventKind",
    "SimulationInput",
    "SimulationRequest",
    "YearlyData",
    "SplitYearlyData",
    "Summary",
    "CompoundSummary",
    "FixedSummary",
    "MixedSummary",
    "SplitSummary",
    "EventLogItem",
    "CompoundResult",
    "FixedResult",
    "MixedResult",
    "SimulationResult",
    "PhaseResult",
]
