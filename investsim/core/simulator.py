"""Entry point of the engine: pick the strategy by `investment_type`."""

from __future__ import annotations

import logging
from typing import Callable, Dict

from investsim.core.compound import simulate_compound
from investsim.core.fixed_income import simulate_fixed_income
from investsim.core.mixed import simulate_mixed
from investsim.schemas.simulation import SimulationInput, SimulationResult

logger = logging.getLogger(__name__)

ENGINES: Dict[str, Callable[[SimulationInput], SimulationResult]] = {
    "compound": simulate_compound,
    "fixed": simulate_fixed_income,
    "mixed": simulate_mixed,
}


def simulate(inputs: SimulationInput) -> SimulationResult:
    """
    Run one simulation.

    Never raises on odd numbers: the result is always structurally valid, even
    if it is an empty series. An unknown or missing `investment_type` runs the
    compound engine.
    """
    engine = ENGINES.get(inputs.investment_type or "compound")
    if engine is None:
        logger.debug("unknown investment type %r, using compound", inputs.investment_type)
        engine = simulate_compound
    return engine(inputs)


__all__ = ["ENGINES", "simulate"]
