"""Helpers for extracting incoming calculation requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest


def parse_calculation_payload(req: Request) -> dict[str, Any]:
    """Extract a JSON object from ``req``.

    Query-string values are merged in for keys the body omits, so a rate
    category can be chosen with ``?category=standard``.
    """

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    payload = dict(data)
    category = req.args.get("category")
    if category and "category" not in payload and "gstRate" not in payload:
        payload["category"] = category

    return payload
