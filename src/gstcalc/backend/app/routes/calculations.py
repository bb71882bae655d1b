"""REST endpoints for forward and reverse GST calculations."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from gstcalc.backend.services import (
    build_calculation_response,
    calculate_forward_payload,
    calculate_reverse_payload,
    parse_calculation_payload,
)

blueprint = Blueprint("calculations", __name__, url_prefix="/api/v1/calculations")


@blueprint.post("/forward")
def create_forward_calculation() -> tuple[Any, int]:
    """Add GST on top of the submitted base price."""

    payload = parse_calculation_payload(request)
    result = calculate_forward_payload(payload)

    return build_calculation_response(result)


@blueprint.post("/reverse")
def create_reverse_calculation() -> tuple[Any, int]:
    """Extract GST from the submitted tax-inclusive total."""

    payload = parse_calculation_payload(request)
    result = calculate_reverse_payload(payload)

    return build_calculation_response(result)
