"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from retirement_calculator.core.ping import get_ping
from retirement_calculator.core.projection import compute_projection, summarize_projection
from retirement_calculator.schemas.projection import ProjectionRequest, RetirementInputs

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("Rejected projection request: %d error(s)", exc.error_count())
    errors = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": errors}), HTTPStatus.BAD_REQUEST


def _read_projection_request() -> ProjectionRequest:
    # malformed JSON reads as None and fails validation like any other bad body
    payload = request.get_json(force=True, silent=True)
    return ProjectionRequest.model_validate(payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping().model_dump())


@api_bp.get("/projection/defaults")
def projection_defaults() -> Any:
    """Initial form values."""
    return jsonify(RetirementInputs().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Savings trajectory and projected monthly retirement income."""
    inputs = _read_projection_request()
    result = compute_projection(inputs)
    current_app.logger.info(
        "Projected ages %d-%d: %d points, total monthly income %.2f",
        inputs.currentAge,
        inputs.retirementAge,
        len(result.trajectory),
        result.totalMonthlyIncome,
    )
    return jsonify(result.model_dump())


@api_bp.post("/projection/summary")
def projection_summary() -> Any:
    """Same projection, with the figures formatted for display."""
    inputs = _read_projection_request()
    summary = summarize_projection(inputs, compute_projection(inputs))
    return jsonify(summary.model_dump())
