"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from backend import __version__
from backend.core.compound import compute_schedule
from backend.domain.compound import ProjectionInputError
from backend.log import get_logger
from backend.schemas.compound import (
    CalculatorOptions,
    CompoundRequest,
    CompoundResponse,
)
from backend.schemas.health import HealthResponse

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("compound.rejected", error_count=exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(ProjectionInputError)
def _handle_projection_error(exc: ProjectionInputError):
    logger.warning("compound.precondition_failed", error=str(exc))
    return jsonify({"detail": [str(exc)]}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Year-by-year compound growth schedule for the submitted calculator form."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CompoundRequest.model_validate(raw_payload)
    logger.info(
        "compound.request",
        years=payload.years,
        compounding=payload.compounding.value,
        contribution_frequency=payload.contributionFrequency,
        due=payload.due,
    )
    result = compute_schedule(payload.to_parameters())
    response = CompoundResponse.from_result(result)
    return jsonify(response.model_dump(mode="json"))


@api_bp.get("/calc/compound/options")
def compound_options() -> Any:
    """Choices and defaults for the calculator form."""
    return jsonify(CalculatorOptions.build().model_dump(mode="json"))
