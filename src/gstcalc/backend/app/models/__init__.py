"""Typed request/result models shared by the calculator, routes and CLI."""

from .api import (
    ForwardFormatted,
    ForwardRequest,
    ForwardResult,
    ReverseFormatted,
    ReverseRequest,
    ReverseResult,
    invalid_argument_from_validation_error,
)

__all__ = [
    "ForwardFormatted",
    "ForwardRequest",
    "ForwardResult",
    "ReverseFormatted",
    "ReverseRequest",
    "ReverseResult",
    "invalid_argument_from_validation_error",
]
