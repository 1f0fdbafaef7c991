"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request
from werkzeug.exceptions import BadRequest

from backend.core.export import csv_filename, snapshots_to_csv
from backend.core.tax_brackets import TAX_BRACKETS
from backend.domain.simulation import SimulationValidationError, run_simulation
from backend.schemas.simulation import (
    ErrorResponse,
    PingResponse,
    SimulationResponse,
    TaxBracketsResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(SimulationValidationError)
def _handle_validation_error(exc: SimulationValidationError):
    """Turn form validation failures into a 400 with user-facing messages."""
    body = ErrorResponse(error=exc.errors)
    return jsonify(body.model_dump()), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=False)
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/tax-brackets")
def tax_brackets() -> Any:
    """Publish the regressive withholding schedule used by the projection."""
    response = TaxBracketsResponse(brackets=list(TAX_BRACKETS))
    return jsonify(response.model_dump())


@api_bp.post("/simulation")
def simulation() -> Any:
    """Month-by-month projection table plus summary totals."""
    result = run_simulation(_json_payload())
    response = SimulationResponse(
        parameters=result.parameters,
        totalMonths=result.total_months,
        monthlyRate=result.monthly_rate,
        rows=result.rows,
        summary=result.summary,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/simulation/export.csv")
def simulation_csv() -> Response:
    """Same projection as /simulation, serialized as a downloadable CSV."""
    result = run_simulation(_json_payload())
    return Response(
        snapshots_to_csv(result.rows),
        mimetype="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{csv_filename()}"'},
    )
