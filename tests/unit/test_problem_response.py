"""Unit tests for the JSON problem payloads."""

from __future__ import annotations

from gstcalc.backend.app.errors import InvalidType, OutOfRange
from gstcalc.backend.app.http import ProblemResponse


def test_argument_error_keeps_kind_and_parameter() -> None:
    problem = ProblemResponse.from_argument_error(
        OutOfRange("gstRate", "must be between 0 and 100, got 150")
    )

    assert problem.status == 400
    assert problem.as_dict() == {
        "error": "out_of_range",
        "parameter": "gstRate",
        "message": "gstRate must be between 0 and 100, got 150",
    }


def test_argument_error_does_not_share_payload_state() -> None:
    error = InvalidType("basePrice", "must be a number")
    ProblemResponse.from_argument_error(error).details["parameter"] = "other"

    assert error.as_dict()["parameter"] == "basePrice"


def test_message_is_omitted_when_empty() -> None:
    assert ProblemResponse("bad_request", status=400).as_dict() == {
        "error": "bad_request"
    }


def test_to_response_uses_status(app) -> None:
    with app.app_context():
        response, status = ProblemResponse(
            "configuration_error", status=500, message="broken"
        ).to_response()

    assert status == 500
    assert response.get_json() == {"error": "configuration_error", "message": "broken"}
