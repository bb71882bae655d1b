"""Validate request payloads and dispatch them to the GST calculator.

Routes and the command line hand raw mappings to this module. It parses them
into the shared request models, resolves a category name to its rate when one
is supplied instead of ``gstRate``, and delegates the arithmetic to
:class:`~gstcalc.backend.app.services.GSTCalculator`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from gstcalc.backend.app.models import (
    ForwardRequest,
    ForwardResult,
    ReverseRequest,
    ReverseResult,
    invalid_argument_from_validation_error,
)
from gstcalc.backend.app.services import GSTCalculator, get_default_calculator

_LOGGER = logging.getLogger(__name__)


def _validate(model: type[ForwardRequest] | type[ReverseRequest], payload: Any):
    if not isinstance(payload, Mapping):
        raise ValueError("Payload must be a mapping")
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise invalid_argument_from_validation_error(exc) from exc


def _resolve_rate(
    request: ForwardRequest | ReverseRequest, calculator: GSTCalculator
) -> float:
    if request.category is not None:
        return calculator.rate_for(request.category)
    return request.gst_rate  # type: ignore[return-value]


def calculate_forward_payload(
    payload: Mapping[str, Any],
    calculator: GSTCalculator | None = None,
) -> ForwardResult:
    """Run a forward calculation for a ``{"basePrice", "gstRate"}`` payload."""

    calculator = calculator or get_default_calculator()
    request = _validate(ForwardRequest, payload)
    rate = _resolve_rate(request, calculator)

    result = calculator.calculate_forward(request.base_price, rate)
    _LOGGER.debug(
        "Forward GST: base=%s rate=%s total=%s",
        result.base_price,
        result.gst_rate,
        result.total_price,
    )
    return result


def calculate_reverse_payload(
    payload: Mapping[str, Any],
    calculator: GSTCalculator | None = None,
) -> ReverseResult:
    """Run a reverse calculation for a ``{"totalPrice", "gstRate"}`` payload."""

    calculator = calculator or get_default_calculator()
    request = _validate(ReverseRequest, payload)
    rate = _resolve_rate(request, calculator)

    result = calculator.calculate_reverse(request.total_price, rate)
    _LOGGER.debug(
        "Reverse GST: total=%s rate=%s base=%s",
        result.total_price,
        result.gst_rate,
        result.base_price,
    )
    return result


__all__ = ["calculate_forward_payload", "calculate_reverse_payload"]
