"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from investsim.config import Settings
from investsim.core.form import normalize_request
from investsim.core.ping import get_ping_message, get_service_info
from investsim.core.rates import effective_annual_rate
from investsim.core.simulator import simulate
from investsim.schemas.ping import PingResponse
from investsim.schemas.rates import (
    EffectiveRateRequest,
    EffectiveRateResponse,
    MarketIndicators,
)
from investsim.schemas.simulation import SimulationRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected %s %s: %d validation error(s)", request.method, request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    service, version = get_service_info()
    response = PingResponse(message=get_ping_message(), service=service, version=version)
    return jsonify(response.model_dump())


@api_bp.post("/simulate")
def run_simulation() -> Any:
    """Run one simulation with the calculator's form values."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = SimulationRequest.model_validate(raw_payload)
    inputs = normalize_request(payload, max_years=_settings().max_years)
    result = simulate(inputs)
    logger.info(
        "simulated %s over %d years: final balance %.2f",
        result.investment_type,
        inputs.years,
        result.summary.final_balance,
    )
    return jsonify(result.model_dump(by_alias=True, exclude_none=True))


@api_bp.post("/rates/effective")
def effective_rate() -> Any:
    """Annual rate implied by a CDI share or an IPCA+ spread."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = EffectiveRateRequest.model_validate(raw_payload)
    settings = _settings()
    indicators = MarketIndicators(
        cdi=payload.cdi if payload.cdi is not None else settings.default_cdi_rate,
        ipca=payload.ipca if payload.ipca is not None else settings.default_ipca_rate,
    )
    rate = effective_annual_rate(payload, indicators)
    response = EffectiveRateResponse(
        mode=payload.mode,
        annual_interest_rate=payload.manual_rate if rate is None else rate,
    )
    return jsonify(response.model_dump(by_alias=True))
