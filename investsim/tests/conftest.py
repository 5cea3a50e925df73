from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from investsim.app import create_app
from investsim.config import Settings
from investsim.schemas.simulation import SimulationInput


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings(log_level="DEBUG", max_years=40))


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def mixed_inputs() -> SimulationInput:
    """Ten-year mixed plan switching from compound to fixed income after five years."""
    return SimulationInput(
        initial_investment=1000,
        monthly_contribution=200,
        annual_interest_rate=12,
        annual_interest_rate_phase2=6,
        years=10,
        investment_type="mixed",
        reinvestment_mode="amount",
        reinvestment_value=0,
        switch_to_fixed_year=5,
        mixed_investment_order="compound_first",
    )
