"""Expose the GST rate categories to API consumers."""

from __future__ import annotations

from flask import Blueprint, jsonify

from gstcalc.backend.app.services import format_currency, get_default_calculator
from gstcalc.backend.app.services.formatting import CURRENCY_CODE

blueprint = Blueprint("rates", __name__, url_prefix="/api/v1/rates")


@blueprint.get("")
def list_rates():
    """Return every configured category with its percentage."""

    rates = get_default_calculator().get_gst_rates()
    return jsonify({"currency": CURRENCY_CODE, "rates": rates}), 200


@blueprint.get("/<category>")
def get_rate(category: str):
    """Return a single category together with a worked example on ₹100."""

    calculator = get_default_calculator()
    rate = calculator.rate_for(category)
    example = calculator.calculate_forward(100, rate)
    payload = {
        "category": category.strip().lower(),
        "gstRate": rate,
        "example": {
            "basePrice": format_currency(example.base_price),
            "totalPrice": example.formatted.total_price,
        },
    }
    return jsonify(payload), 200
