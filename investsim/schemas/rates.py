"""Data contracts for deriving an annual rate from market indicators."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RateMode = Literal["manual", "cdi", "ipca_plus"]


class MarketIndicators(BaseModel):
    """Reference rates, both in percent per year."""

    model_config = ConfigDict(frozen=True)

    cdi: float = Field(..., ge=0, description="Interbank deposit (CDI) rate.")
    ipca: float = Field(..., description="Projected consumer price inflation (IPCA).")


class EffectiveRateRequest(BaseModel):
    """How the user wants the annual rate to be derived."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    mode: RateMode = "manual"
    manual_rate: Optional[float] = Field(None, ge=0, le=100)
    cdi_percent: float = Field(100.0, ge=0, description="Share of CDI paid, in percent.")
    ipca_fixed: float = Field(6.0, description="Fixed real spread over IPCA, in percent.")
    # Fall back to configured defaults when omitted.
    cdi: Optional[float] = Field(None, ge=0)
    ipca: Optional[float] = None


class EffectiveRateResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mode: RateMode
    annual_interest_rate: Optional[float]
