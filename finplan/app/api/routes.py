"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Callable, Dict

from flask import Blueprint, jsonify, request
from pydantic import BaseModel

from finplan.core import plan_retirement, simulate_sip, simulate_swp
from finplan.domain.validation import InvalidParameter

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(InvalidParameter)
def _handle_invalid_parameter(exc: InvalidParameter):
    """Report every violated constraint at once."""
    logger.info("Rejected %s payload: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _run(calculation: Callable[[Dict[str, Any]], BaseModel]) -> Any:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidParameter(["request body must be a JSON object"])
    result = calculation(payload)
    logger.debug("Completed %s", request.path)
    return jsonify(result.model_dump(mode="json", by_alias=True))


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.post("/calc/sip")
def sip() -> Any:
    """Month-by-month SIP accumulation with yearly step-up."""
    return _run(simulate_sip)


@api_bp.post("/calc/swp")
def swp() -> Any:
    """Month-by-month withdrawal plan with inflation-indexed withdrawals."""
    return _run(simulate_swp)


@api_bp.post("/calc/retirement")
def retirement() -> Any:
    """Retirement accumulation, sustainability and advice."""
    return _run(plan_retirement)
