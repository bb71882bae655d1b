"""Unit coverage for Indian Rupee formatting."""

from __future__ import annotations

import pytest

from gstcalc.backend.app.errors import InvalidType, OutOfRange
from gstcalc.backend.app.services import format_currency
from gstcalc.backend.app.services.formatting import group_indian_digits


@pytest.mark.parametrize(
    ("digits", "expected"),
    [
        ("0", "0"),
        ("123", "123"),
        ("1234", "1,234"),
        ("12345", "12,345"),
        ("123456", "1,23,456"),
        ("1234567", "12,34,567"),
        ("123456789", "12,34,56,789"),
    ],
)
def test_group_indian_digits(digits: str, expected: str) -> None:
    assert group_indian_digits(digits) == expected


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (0, "₹0.00"),
        (180, "₹180.00"),
        (1180, "₹1,180.00"),
        (1234567.5, "₹12,34,567.50"),
        (100000, "₹1,00,000.00"),
        (10000000, "₹1,00,00,000.00"),
        (0.005, "₹0.01"),
        (1.005, "₹1.01"),
        (2.675, "₹2.68"),
        (49.994, "₹49.99"),
        (-1234.5, "-₹1,234.50"),
    ],
)
def test_format_currency(amount: float, expected: str) -> None:
    assert format_currency(amount) == expected


def test_format_currency_handles_large_amounts() -> None:
    assert format_currency(1e20) == "₹10,00,00,00,00,00,00,00,00,000.00"


def test_format_currency_drops_sign_of_negative_zero() -> None:
    assert format_currency(-0.001) == "₹0.00"


def test_format_currency_rejects_non_numeric() -> None:
    with pytest.raises(InvalidType):
        format_currency("1180")


def test_format_currency_rejects_non_finite() -> None:
    with pytest.raises(OutOfRange):
        format_currency(float("inf"))
