"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from stepup_sip.config import Settings
from stepup_sip.core.formatting import summarize
from stepup_sip.core.ping import build_ping_response
from stepup_sip.core.sip import allocation_breakdown, calculate_step_up_sip
from stepup_sip.schemas.sip import SipCalculationResponse, StepUpSipRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _parse_request() -> StepUpSipRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return StepUpSipRequest.model_validate(raw_payload, context={"settings": _settings()})


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected calculator input: %d error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(build_ping_response(_settings()).model_dump())


@api_bp.post("/calc/step-up-sip")
def step_up_sip() -> Any:
    """Totals, yearly breakdown and pie-chart allocation for a step-up SIP."""
    payload = _parse_request()
    result = calculate_step_up_sip(payload)
    response = SipCalculationResponse(
        **result.model_dump(),
        allocation=allocation_breakdown(result),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/step-up-sip/summary")
def step_up_sip_summary() -> Any:
    """Same calculation, formatted as rupee strings for display."""
    payload = _parse_request()
    result = calculate_step_up_sip(payload)
    return jsonify(summarize(result).model_dump())
