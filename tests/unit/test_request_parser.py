"""Unit tests for calculation request parsing helpers."""

from __future__ import annotations

import pytest
from flask import Flask, request
from werkzeug.exceptions import BadRequest

from gstcalc.backend.services.request_parser import parse_calculation_payload


def test_parse_payload_returns_json_object(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations/forward",
        method="POST",
        json={"basePrice": 1000, "gstRate": 18},
    ):
        payload = parse_calculation_payload(request)

    assert payload == {"basePrice": 1000, "gstRate": 18}


def test_parse_payload_reads_category_from_query_string(app: Flask) -> None:
    """``?category=`` should fill in the rate when the body omits one."""

    with app.test_request_context(
        "/api/v1/calculations/forward?category=luxury",
        method="POST",
        json={"basePrice": 1000},
    ):
        payload = parse_calculation_payload(request)

    assert payload["category"] == "luxury"


def test_parse_payload_prefers_explicit_rate_over_query_category(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations/forward?category=luxury",
        method="POST",
        json={"basePrice": 1000, "gstRate": 18},
    ):
        payload = parse_calculation_payload(request)

    assert "category" not in payload


def test_parse_payload_rejects_non_object(app: Flask) -> None:
    """Non-object JSON payloads should trigger BadRequest responses."""

    with app.test_request_context(
        "/api/v1/calculations/forward",
        method="POST",
        json=[1000, 18],
    ):
        with pytest.raises(BadRequest):
            parse_calculation_payload(request)


def test_parse_payload_rejects_invalid_json(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations/forward",
        method="POST",
        data="basePrice=1000",
        content_type="application/json",
    ):
        with pytest.raises(BadRequest, match="valid JSON"):
            parse_calculation_payload(request)
