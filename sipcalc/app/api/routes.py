"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from sipcalc.core.formatting import UnknownCurrencyError, get_currency_format
from sipcalc.core.ping import get_ping_message, get_service_name
from sipcalc.core.projection import ProjectionResult, project
from sipcalc.core.report import build_report
from sipcalc.domain.inputs import InvalidInputError, collect_inputs
from sipcalc.schemas.ping import PingResponse
from sipcalc.schemas.projection import ProjectionRequest, ProjectionResponse
from sipcalc.utils.logging import get_logger

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected malformed projection request: %d error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    logger.warning("rejected projection inputs: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(UnknownCurrencyError)
def _handle_unknown_currency(exc: UnknownCurrencyError):
    logger.warning("rejected report currency %r", exc.code)
    return jsonify({"error": [str(exc)]}), HTTPStatus.BAD_REQUEST


def _run_projection() -> ProjectionResult:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    settings = current_app.config["SETTINGS"]
    inputs = collect_inputs(payload, max_tenure_years=settings.max_tenure_years)
    result = project(inputs)
    logger.info(
        "projection computed tenure_years=%d final_value=%.2f",
        inputs.tenure_years,
        result.final_value,
    )
    return result


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), service=get_service_name())
    return jsonify(response.model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Raw engine output: summary figures plus the yearly breakdown."""
    result = _run_projection()
    response = ProjectionResponse.model_validate(result.model_dump())
    return jsonify(response.model_dump())


@api_bp.post("/calc/projection/report")
def projection_report() -> Any:
    """Same projection, formatted for display in the requested currency."""
    settings = current_app.config["SETTINGS"]
    fmt = get_currency_format(request.args.get("currency", settings.default_currency))
    report = build_report(_run_projection(), fmt)
    return jsonify(report.model_dump())
