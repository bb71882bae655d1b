"""Calculation core: GST arithmetic and INR formatting."""

from .formatting import format_currency
from .gst_calculator import (
    GSTCalculator,
    calculate_forward,
    calculate_reverse,
    get_default_calculator,
    get_gst_rates,
)

__all__ = [
    "GSTCalculator",
    "calculate_forward",
    "calculate_reverse",
    "format_currency",
    "get_default_calculator",
    "get_gst_rates",
]
