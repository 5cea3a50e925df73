"""
Turn a raw calculator request into engine input.

The engine trusts its input, so every constraint the calculator form
enforces lives here: horizons are clamped instead of rejected, fields that do
not apply to the chosen strategy are dropped, and missing values take the
form's defaults.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from investsim.schemas.simulation import SimulationInput, SimulationRequest

logger = logging.getLogger(__name__)

# Defaults shown by the calculator form before the user edits anything.
FORM_DEFAULTS: Dict[str, Any] = {
    "reinvestment_value": 0.0,
    "reinvestment_percentage": 50.0,
    "reinvestment_threshold": 0.0,
    "switch_to_fixed_year": 10,
    "split_value": 10000.0,
    "split_percentage": 80.0,
}

MIN_MIXED_YEARS = 2

_REINVESTMENT_FIELDS = {
    "amount": "reinvestment_value",
    "percentage": "reinvestment_percentage",
    "above_threshold": "reinvestment_threshold",
}

_SPLIT_FIELDS = {
    "amount": "split_value",
    "percentage": "split_percentage",
}


def _value_or_default(request: SimulationRequest, name: str) -> Any:
    value = getattr(request, name)
    return FORM_DEFAULTS[name] if value is None else value


def clamp_mixed_horizon(years: int, switch_year: int) -> tuple[int, int]:
    """
    A mixed run needs room for two phases: at least 2 years, and phase 1
    must end strictly before the horizon.
    """
    if years < MIN_MIXED_YEARS:
        logger.info("mixed strategy needs %d years, raising horizon from %d", MIN_MIXED_YEARS, years)
        years = MIN_MIXED_YEARS
    if switch_year >= years:
        clamped = max(1, years - 1)
        logger.info("switch year %d is not before year %d, clamping to %d", switch_year, years, clamped)
        switch_year = clamped
    return years, switch_year


def normalize_request(request: SimulationRequest, max_years: Optional[int] = None) -> SimulationInput:
    """Build the `SimulationInput` the form would have sent for this request."""
    kind = request.investment_type
    years = request.years
    if max_years is not None and years > max_years:
        logger.info("horizon %d exceeds the %d-year limit, clamping", years, max_years)
        years = max_years

    fields: Dict[str, Any] = {
        "initial_investment": request.initial_investment,
        # fixed income has no deposits
        "monthly_contribution": 0.0 if kind == "fixed" else request.monthly_contribution,
        "annual_interest_rate": request.annual_interest_rate,
        "investment_type": kind,
    }

    if kind in ("fixed", "mixed"):
        mode = request.reinvestment_mode
        field = _REINVESTMENT_FIELDS[mode]
        fields["reinvestment_mode"] = mode
        fields[field] = _value_or_default(request, field)

    if kind == "mixed":
        years, switch_year = clamp_mixed_horizon(years, _value_or_default(request, "switch_to_fixed_year"))
        fields["switch_to_fixed_year"] = switch_year
        fields["annual_interest_rate_phase2"] = request.annual_interest_rate_phase2
        fields["mixed_investment_order"] = request.mixed_investment_order
        fields["enable_split"] = request.enable_split
        if request.enable_split:
            field = _SPLIT_FIELDS[request.split_mode]
            fields["split_mode"] = request.split_mode
            fields[field] = _value_or_default(request, field)

    fields["years"] = years
    return SimulationInput(**fields)
