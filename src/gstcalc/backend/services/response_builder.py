"""Utilities for serialising calculation responses."""

from __future__ import annotations

from typing import Any, Tuple

from flask import jsonify

from gstcalc.backend.app.models import ForwardResult, ReverseResult

ResponseTuple = Tuple[Any, int]


def build_calculation_response(result: ForwardResult | ReverseResult) -> ResponseTuple:
    """Return a Flask JSON response for a calculation ``result``."""

    return jsonify(result.as_dict()), 200
