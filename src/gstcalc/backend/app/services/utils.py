"""Argument checks shared by the calculation and formatting helpers."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any

from gstcalc.backend.app.errors import InvalidType, OutOfRange

MIN_RATE = 0.0
MAX_RATE = 100.0


def ensure_real(value: Any, parameter: str) -> float:
    """Return ``value`` as a finite float or raise for non-numeric input."""

    # ``bool`` is a ``Real`` subclass but never a price or a rate.
    if isinstance(value, bool) or not isinstance(value, Real | Decimal):
        raise InvalidType(parameter, f"must be a number, got {type(value).__name__}")

    # Huge ints overflow and signalling NaNs refuse to convert.
    try:
        number = float(value)
    except (OverflowError, ValueError):
        raise OutOfRange(parameter, "must be a finite number") from None
    if not math.isfinite(number):
        raise OutOfRange(parameter, "must be a finite number")
    return number


def ensure_non_negative(value: Any, parameter: str) -> float:
    """Validate monetary inputs such as base and total prices."""

    number = ensure_real(value, parameter)
    if number < 0:
        raise OutOfRange(parameter, "must be a non-negative number")
    return number


def ensure_rate(value: Any, parameter: str = "gstRate") -> float:
    """Validate a GST percentage against the inclusive [0, 100] bounds."""

    number = ensure_real(value, parameter)
    if number < MIN_RATE or number > MAX_RATE:
        raise OutOfRange(
            parameter,
            f"must be between {MIN_RATE:g} and {MAX_RATE:g}, got {number:g}",
        )
    return number


__all__ = ["MAX_RATE", "MIN_RATE", "ensure_non_negative", "ensure_rate", "ensure_real"]
