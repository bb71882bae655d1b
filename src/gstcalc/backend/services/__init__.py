"""Service-layer helpers bridging HTTP requests and the GST calculator."""

from .calculation_service import calculate_forward_payload, calculate_reverse_payload
from .request_parser import parse_calculation_payload
from .response_builder import build_calculation_response

__all__ = [
    "calculate_forward_payload",
    "calculate_reverse_payload",
    "parse_calculation_payload",
    "build_calculation_response",
]
