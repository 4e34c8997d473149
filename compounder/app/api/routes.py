"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from compounder.core.ping import get_ping_response
from compounder.core.presentation import (
    COMPOUNDING_OPTIONS,
    build_chart,
    build_table,
    export_filename,
)
from compounder.core.series import (
    InvalidParametersError,
    compute,
    to_csv,
    validation_errors,
)
from compounder.schemas.series import SeriesRequest, SeriesResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

INVALID_INPUT_MESSAGE = "Please enter valid positive numbers for initial value and years."
CSV_MIMETYPE = "text/csv; charset=utf-8"


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Malformed payloads (missing fields, non-numeric strings) become 422s."""
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidParametersError)
def _handle_invalid_parameters(exc: InvalidParametersError):
    return (
        jsonify({"error": exc.errors, "message": INVALID_INPUT_MESSAGE}),
        HTTPStatus.BAD_REQUEST,
    )


def _load_parameters() -> SeriesRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = SeriesRequest.model_validate(raw_payload)
    errors = validation_errors(params)
    if errors:
        logger.info("Rejected series parameters: %s", "; ".join(errors))
        raise InvalidParametersError(errors)
    return params


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping_response().model_dump())


@api_bp.get("/compounding-options")
def compounding_options() -> Any:
    """Choices for the compounding frequency select."""
    return jsonify([option.model_dump() for option in COMPOUNDING_OPTIONS])


@api_bp.post("/series")
def series() -> Any:
    """Year-by-year values plus the rows the results table shows."""
    params = _load_parameters()
    points = compute(params)
    response = SeriesResponse(
        parameters=params,
        series=points,
        table=build_table(params, points),
        final_value=points[-1].value,
    )
    return jsonify(response.model_dump())


@api_bp.post("/series/chart")
def series_chart() -> Any:
    """Chart configuration for the requested series."""
    params = _load_parameters()
    chart = build_chart(params, compute(params))
    return jsonify(chart.model_dump())


@api_bp.post("/series/export")
def series_export() -> Response:
    """Download the series as a CSV attachment."""
    params = _load_parameters()
    filename = export_filename(params)
    logger.info("Exporting %s", filename)
    return Response(
        to_csv(compute(params)),
        content_type=CSV_MIMETYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
